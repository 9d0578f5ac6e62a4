import math
import pytest
from search.pagination import normalize, total_pages, NormalizedParams, DEFAULT_PAGE_SIZE


# ------------------------------------------------------
# normalize()
# ------------------------------------------------------

@pytest.mark.parametrize("page", [0, -1, -100])
def test_page_below_one_becomes_one(page):
    assert normalize(page, 10).page == 1


@pytest.mark.parametrize("page", [1, 2, 57, 10_000])
def test_valid_page_is_kept(page):
    assert normalize(page, 10).page == page


@pytest.mark.parametrize("page_size", [0, -5, -1000])
def test_page_size_below_one_falls_back_to_default(page_size):
    assert normalize(1, page_size).size == DEFAULT_PAGE_SIZE == 10


def test_large_page_size_is_not_capped():
    assert normalize(1, 5000).size == 5000


def test_offset_is_zero_based():
    assert normalize(1, 10).offset == 0
    assert normalize(2, 5).offset == 5
    assert normalize(7, 25).offset == 150


def test_invalid_inputs_normalize_together():
    # page 0 / size -5 -> first page of the default size
    assert normalize(0, -5) == NormalizedParams(page=1, size=10, offset=0)


# ------------------------------------------------------
# total_pages()
# ------------------------------------------------------

def test_no_hits_means_no_pages():
    assert total_pages(0, 10) == 0


def test_partial_last_page_counts():
    assert total_pages(12, 5) == 3
    assert total_pages(1, 10) == 1


def test_exact_multiple():
    assert total_pages(1000, 10) == 100


def test_matches_ceiling_division():
    for hits in range(0, 60):
        for size in range(1, 12):
            assert total_pages(hits, size) == math.ceil(hits / size)


def test_huge_totals_stay_exact():
    hits = 10**18 + 1
    assert total_pages(hits, 10) == 10**17 + 1
