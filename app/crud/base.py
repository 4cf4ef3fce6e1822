from typing import TypeVar, Generic, Type, Any, Optional, List, Dict, Sequence
from sqlalchemy import select, func, update
from sqlalchemy.orm import Session
from pydantic import BaseModel
from app.core.errors import EntityNotFoundError
from app.crud.filters import build_where
from app.db.base_class import Base

ModelType = TypeVar("ModelType", bound=Base)
CreateSchema = TypeVar("CreateSchema", bound=BaseModel)
UpdateSchema = TypeVar("UpdateSchema", bound=BaseModel)

class CRUDBase(Generic[ModelType, CreateSchema, UpdateSchema]):
    """Acesso a dados genérico: find/findById/count/create/update/delete.

    Os métodos ``*_by_id`` levantam EntityNotFoundError quando o registro não
    existe.
    """

    def __init__(self, model: Type[ModelType]): self.model = model

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def get_by_id(self, db: Session, id: Any, options: Sequence[Any] = ()) -> ModelType:
        stmt = select(self.model).where(self.model.id == id).options(*options)
        obj = db.scalars(stmt).first()
        if obj is None:
            raise EntityNotFoundError(self.entity_name, id)
        return obj

    def find(self, db: Session, where: Optional[Dict[str, Any]] = None, options: Sequence[Any] = ()) -> List[ModelType]:
        stmt = select(self.model).options(*options)
        clause = build_where(self.model, where)
        if clause is not None:
            stmt = stmt.where(clause)
        return list(db.scalars(stmt).all())

    def count(self, db: Session, where: Optional[Dict[str, Any]] = None) -> int:
        stmt = select(func.count()).select_from(self.model)
        clause = build_where(self.model, where)
        if clause is not None:
            stmt = stmt.where(clause)
        return db.scalar(stmt) or 0

    def create(self, db: Session, obj_in: CreateSchema) -> ModelType:
        data = obj_in.model_dump()
        obj = self.model(**data)
        db.add(obj); db.commit(); db.refresh(obj)
        return obj

    def update(self, db: Session, db_obj: ModelType, obj_in: UpdateSchema | Dict[str, Any]) -> ModelType:
        data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        for f,v in data.items(): setattr(db_obj, f, v)
        db.add(db_obj); db.commit(); db.refresh(db_obj)
        return db_obj

    def update_all(self, db: Session, obj_in: UpdateSchema | Dict[str, Any], where: Optional[Dict[str, Any]] = None) -> int:
        data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True)
        if not data:
            # nada para gravar: devolve quantos registros casam com o filtro
            return self.count(db, where)
        stmt = update(self.model).values(**data).execution_options(synchronize_session=False)
        clause = build_where(self.model, where)
        if clause is not None:
            stmt = stmt.where(clause)
        result = db.execute(stmt)
        db.commit()
        return result.rowcount

    def update_by_id(self, db: Session, id: Any, obj_in: UpdateSchema | Dict[str, Any]) -> ModelType:
        return self.update(db, self.get_by_id(db, id), obj_in)

    def replace_by_id(self, db: Session, id: Any, obj_in: BaseModel, exclude: set[str] | None = None) -> ModelType:
        db_obj = self.get_by_id(db, id)
        data = obj_in.model_dump(exclude={"id"} | (exclude or set()))
        return self.update(db, db_obj, data)

    def delete_by_id(self, db: Session, id: Any, commit: bool = True) -> ModelType:
        obj = self.get_by_id(db, id)
        db.delete(obj)
        if commit:
            db.commit()
        else:
            db.flush()
        return obj
