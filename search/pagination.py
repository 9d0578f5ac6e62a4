from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class NormalizedParams:
    page: int
    size: int
    offset: int


def normalize(page: int, page_size: int) -> NormalizedParams:
    """
    Clamp pagination inputs and compute the zero-based offset.
    There is no upper bound: the engine decides how large a page it will serve.
    """
    page = DEFAULT_PAGE if page < 1 else page
    size = DEFAULT_PAGE_SIZE if page_size < 1 else page_size
    offset = (page - 1) * size
    return NormalizedParams(page=page, size=size, offset=offset)


def total_pages(total_hits: int, size: int) -> int:
    if total_hits <= 0:
        return 0
    return (total_hits + size - 1) // size
