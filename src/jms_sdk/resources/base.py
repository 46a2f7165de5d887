"""
Shared building blocks for resource wrappers

Resources delegate all request handling to a ``JmsAPI`` facade; this module
only provides the model/filter containers and the common get/list flow.
"""

import logging
from dataclasses import asdict, dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Optional, Type

from ..api import JmsAPI
from ..exceptions import ValidationError
from ..utils import combine_url

logger = logging.getLogger(__name__)


@dataclass
class Model:
    """
    Base class for API representations.

    Declared fields are filled from the JSON object; unknown keys are kept
    in ``extra`` so newer server versions do not break decoding.
    """
    extra: Dict[str, Any] = field(default_factory=dict, repr=False)

    def load(self, data: Any) -> 'Model':
        if not isinstance(data, dict):
            raise TypeError(f"cannot decode {type(data).__name__} into {type(self).__name__}")

        names = {f.name for f in fields(self)} - {'extra'}
        for key, value in data.items():
            if key in names:
                setattr(self, key, value)
            else:
                self.extra[key] = value
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Model':
        return cls().load(data)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop('extra')
        data.update(extra)
        return data


class ModelList(list):
    """
    List of models decoded from a list response.

    Accepts either a bare JSON array or a paginated object with ``count``,
    ``next``, ``previous`` and ``results``.
    """

    def __init__(self, model: Type[Model]):
        super().__init__()
        self.model = model
        self.count: Optional[int] = None
        self.next: Optional[str] = None
        self.previous: Optional[str] = None

    def load(self, data: Any) -> 'ModelList':
        if isinstance(data, dict) and 'results' in data:
            self.count = data.get('count')
            self.next = data.get('next')
            self.previous = data.get('previous')
            items = data['results']
        else:
            items = data

        if not isinstance(items, list):
            raise TypeError(f"cannot decode {type(items).__name__} into a list of {self.model.__name__}")

        self[:] = [self.model.from_dict(item) for item in items]
        if self.count is None:
            self.count = len(self)
        return self

    def to_list(self) -> List[Dict[str, Any]]:
        return [item.to_dict() for item in self]


@dataclass
class QueryFilter:
    """Base class for list filters; unset fields are left out of the query."""

    def to_query(self) -> Dict[str, List[str]]:
        query: Dict[str, List[str]] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or value == "":
                continue
            if isinstance(value, bool):
                value = 'true' if value else 'false'
            query[f.name] = [str(value)]
        return query


class Resource:
    """
    Get/list wrapper for one API collection.

    Subclasses set ``path`` (collection path), ``model`` and ``name``.
    """

    path: ClassVar[str] = ""
    name: ClassVar[str] = "resource"
    model: ClassVar[Type[Model]] = Model

    def __init__(self, api: JmsAPI):
        self.api = api

    def _collection_url(self) -> str:
        return combine_url(self.api.get_endpoint(), self.path)

    def _detail_url(self, resource_id: str) -> str:
        return combine_url(self._collection_url(), f"{resource_id}/")

    def get(self, resource_id: str) -> Model:
        """
        Retrieve one item by id.

        Raises:
            ValidationError: If ``resource_id`` is empty
        """
        if not resource_id:
            raise ValidationError(f"{self.name} id can not be empty")

        request = self.api.make_request('GET', self._detail_url(resource_id))
        data = self.model()
        self.api.do_request(request, data)
        return data

    def list(self, filter: Optional[QueryFilter] = None) -> ModelList:
        """List items, optionally narrowed by ``filter``."""
        request = self.api.make_request('GET', self._collection_url())

        if filter is not None:
            query = filter.to_query()
            if query:
                request = self.api.set_query(request, query)

        data = ModelList(self.model)
        self.api.do_request(request, data)
        logger.debug("Listed %d %s", len(data), self.name)
        return data
