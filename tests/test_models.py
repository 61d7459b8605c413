import dataclasses

import pytest

from product_crawler.models import FieldResult, ProductRecord, RecordCollection


def make_record(title: str = "Tkanina") -> ProductRecord:
    return ProductRecord(title, "TK-1", "Skład", "10 zł", "dostępny", "Opis", "https://shop.test/tkanina")


def test_as_row_follows_column_order() -> None:
    assert make_record().as_row() == ["Tkanina", "TK-1", "Skład", "10 zł", "dostępny", "Opis", "https://shop.test/tkanina"]


def test_records_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        make_record().title = "changed"


def test_collection_keeps_insertion_order() -> None:
    collection = RecordCollection()
    for title in ["c", "a", "b"]:
        collection.append(make_record(title))

    assert len(collection) == 3
    assert [r.title for r in collection] == ["c", "a", "b"]
    assert collection[0].title == "c"


def test_collection_only_accepts_records() -> None:
    with pytest.raises(TypeError):
        RecordCollection().append({"title": "x"})


def test_field_result_constructors() -> None:
    assert FieldResult.hit("TK-1") == FieldResult("TK-1", True)
    assert FieldResult.fallback("No number") == FieldResult("No number", False)
