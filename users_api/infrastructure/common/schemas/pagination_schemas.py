"""Schema for the pagination metadata header."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from users_api.application.common.pagination import PageLinks

PAGINATION_HEADER = "X-Pagination"


class PaginationHeader(BaseModel):
    """Flat page metadata record, serialized as a single header value."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    previous_page_link: str | None
    next_page_link: str
    page_size: int
    current_page: int
    total_count: int
    total_pages: int

    @classmethod
    def from_links(cls, links: PageLinks) -> "PaginationHeader":
        return cls(
            previous_page_link=links.previous_page_link,
            next_page_link=links.next_page_link,
            page_size=links.page_size,
            current_page=links.current_page,
            total_count=links.total_count,
            total_pages=links.total_pages,
        )

    def to_header_value(self) -> str:
        return self.model_dump_json(by_alias=True)
