from typing import List
from sqlalchemy.orm import Session
from app.crud.base import CRUDBase
from app.models.inscripcion import Inscripcion
from app.schemas.inscripcion import InscripcionCreate, Inscripcion as InscripcionSchema

class CRUDInscripcion(CRUDBase[Inscripcion, InscripcionCreate, InscripcionSchema]):
    def find_by_evento(self, db: Session, evento_id: int) -> List[Inscripcion]:
        return self.find(db, where={"eventoId": evento_id})

inscripcion_crud = CRUDInscripcion(Inscripcion)
