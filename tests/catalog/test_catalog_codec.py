import pytest
from pydantic import ValidationError
from catgql.catalog import CatalogEntry, Colour, decode_entry, encode_entry, encode_entries
from catgql.core.errors import ErrorKind, MalformedRequest


def test_encode_entry_uses_wire_names():
    entry = CatalogEntry(name="Tom", nicknames=["T"], colour=Colour.Black)
    assert encode_entry(entry) == {
        "name": "Tom",
        "nicknames": ["T"],
        "picUrl": None,
        "colour": "Black",
    }


def test_encode_entries_keeps_order():
    entries = [
        CatalogEntry(name="A", nicknames=[], colour=Colour.Grey),
        CatalogEntry(name="B", nicknames=[], colour=Colour.Calico, pic_url="http://x/b.png"),
    ]
    encoded = encode_entries(entries)
    assert [e["name"] for e in encoded] == ["A", "B"]
    assert encoded[1]["picUrl"] == "http://x/b.png"


def test_decode_entry_accepts_wire_form():
    entry = decode_entry({"name": "Tom", "nicknames": ["Tommy"], "picUrl": "http://x/t.png", "colour": "Ginger"})
    assert entry == CatalogEntry(name="Tom", nicknames=["Tommy"], pic_url="http://x/t.png", colour=Colour.Ginger)


def test_decode_entry_pic_url_is_optional():
    entry = decode_entry({"name": "Tom", "nicknames": [], "colour": "Black"})
    assert entry.pic_url is None


@pytest.mark.parametrize("data", [
    None,
    [],
    "Tom",
    {},
    {"name": "Tom", "nicknames": []},
    {"name": "Tom", "colour": "Black"},
    {"nicknames": [], "colour": "Black"},
    {"name": "Tom", "nicknames": [], "colour": "Purple"},
    {"name": "Tom", "nicknames": "Tommy", "colour": "Black"},
    {"name": 7, "nicknames": [], "colour": "Black"},
])
def test_decode_entry_rejects_bad_input(data):
    with pytest.raises(MalformedRequest) as exc_info:
        decode_entry(data)
    assert exc_info.value.kind == ErrorKind.MALFORMED_REQUEST
    assert exc_info.value.message


def test_entries_are_immutable():
    entry = CatalogEntry(name="Tom", nicknames=[], colour=Colour.Black)
    with pytest.raises(ValidationError):
        entry.name = "Jerry"


def test_nicknames_cannot_be_changed_in_place():
    entry = decode_entry({"name": "Tom", "nicknames": ["Tommy"], "colour": "Black"})
    assert entry.nicknames == ("Tommy",)
    with pytest.raises(AttributeError):
        entry.nicknames.append("hacked")
    assert encode_entry(entry)["nicknames"] == ["Tommy"]
