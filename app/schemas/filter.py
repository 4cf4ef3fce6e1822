from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, List, Optional, Union


class FilterExcludingWhere(BaseModel):
    # paginação/ordenação não são suportadas: chaves extras são rejeitadas
    model_config = ConfigDict(extra="forbid")

    fields: Optional[Union[Dict[str, bool], List[str]]] = None
    include: Optional[List[Union[str, Dict[str, Any]]]] = None


class Filter(FilterExcludingWhere):
    where: Optional[Dict[str, Any]] = None
