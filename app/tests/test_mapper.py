import pytest

from pyines.mapper import MAPPER_NAMES, mapper_name


@pytest.mark.parametrize(
    "mapper_id, name",
    [(0, "NROM"), (1, "MMC1"), (2, "UxROM"), (3, "CNROM"), (4, "MMC3"), (66, "GxROM")],
)
def test_known_mappers(mapper_id, name):
    assert mapper_name(mapper_id) == name


def test_unknown_mapper():
    assert mapper_name(255) is None


def test_table_fits_in_a_byte():
    assert all(0 <= key <= 0xFF for key in MAPPER_NAMES)
