"""Pydantic models for ReportPortal API resources."""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .timestamp import Timestamp

T = TypeVar("T")

# Launch statuses reported by the server
STATUS_PASSED = "PASSED"
STATUS_FAILED = "FAILED"
STATUS_STOPPED = "STOPPED"
STATUS_IN_PROGRESS = "IN_PROGRESS"
STATUS_INTERRUPTED = "INTERRUPTED"


class LaunchMode(str, Enum):
    """Visibility mode of a launch."""

    DEFAULT = "DEFAULT"
    DEBUG = "DEBUG"


class Resource(BaseModel):
    """Base for every decoded resource.

    Resources are immutable, ignore unknown fields, and treat an explicit
    JSON ``null`` the same as a missing field.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Executions(Resource):
    """Execution counters of a launch."""

    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0


class Defects(Resource):
    """Defect counts per category, keyed by defect subtype locator."""

    product_bug: dict[str, int] = Field(default_factory=dict)
    automation_bug: dict[str, int] = Field(default_factory=dict)
    system_issue: dict[str, int] = Field(default_factory=dict)
    to_investigate: dict[str, int] = Field(default_factory=dict)
    no_defect: dict[str, int] = Field(default_factory=dict)


class Statistics(Resource):
    """Aggregated execution and defect statistics."""

    executions: Executions = Field(default_factory=Executions)
    defects: Defects = Field(default_factory=Defects)


class Launch(Resource):
    """A recorded test run."""

    id: str = ""
    name: str = ""
    number: int = 0
    description: str = ""
    start_time: Timestamp | None = None
    end_time: Timestamp | None = None
    status: str = ""
    tags: frozenset[str] = frozenset()
    mode: LaunchMode | None = None
    approximate_duration: float = Field(default=0.0, alias="approximateDuration")
    has_retries: bool = Field(default=False, alias="hasRetries")
    statistics: Statistics | None = None


class FilterEntity(Resource):
    """One ``field condition value`` clause of a saved filter."""

    field: str = Field(default="", alias="filtering_field")
    condition: str = ""
    value: str = ""


class FilterOrder(Resource):
    """Sort instruction of a saved filter."""

    sorting_column: str = ""
    ascending: bool = Field(default=False, alias="is_asc")


class SelectionParams(Resource):
    """Pagination and ordering stored with a filter."""

    page_number: int = 0
    orders: list[FilterOrder] = Field(default_factory=list)


class Filter(Resource):
    """A named query definition stored on the server."""

    id: str = ""
    name: str = ""
    type: str = ""
    owner: str = ""
    entities: list[FilterEntity] = Field(default_factory=list)
    selection: SelectionParams | None = Field(default=None, alias="selection_parameters")


class PageInfo(Resource):
    """Position of a page within the full result set."""

    number: int = 0
    size: int = 0
    total_elements: int = Field(default=0, alias="totalElements")
    total_pages: int = Field(default=0, alias="totalPages")


class Page(Resource, Generic[T]):
    """A single slice of a server-side result set."""

    content: list[T] = Field(default_factory=list)
    page: PageInfo = Field(default_factory=PageInfo)

    @property
    def page_number(self) -> int:
        return self.page.number

    @property
    def page_size(self) -> int:
        return self.page.size

    @property
    def total_elements(self) -> int:
        return self.page.total_elements

    @property
    def total_pages(self) -> int:
        return self.page.total_pages
