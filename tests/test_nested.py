import pytest

from toyapps.nested import HoverKind, Hovered, ListItem, label_items


def test_hovered_display():
    assert str(Hovered(HoverKind.HEADER)) == "Header"
    assert str(Hovered(HoverKind.LIST)) == "List container"
    assert str(Hovered()) == "Nothing"
    assert str(Hovered(HoverKind.ITEM, "Rustin")) == "Rustin"


def test_item_requires_name():
    with pytest.raises(ValueError):
        Hovered(HoverKind.ITEM)
    with pytest.raises(ValueError):
        Hovered(HoverKind.LIST, "Rustin")


def test_label_items_skips_hidden_and_numbers():
    items = [
        ListItem("Rustin"),
        ListItem("Rustaroo", hide=True),
        ListItem("Rustifer"),
    ]
    labelled = label_items(items)
    assert [i.name for i in labelled] == ["#1 - Rustin", "#2 - Rustifer"]
    assert not any(i.hide for i in labelled)
    assert items[0].name == "Rustin"


def test_label_items_empty_and_all_hidden():
    assert label_items([]) == []
    assert label_items([ListItem("Hidden Sub", hide=True)]) == []


def test_label_items_keeps_order():
    names = ["A", "B", "C"]
    labelled = label_items(ListItem(n) for n in names)
    assert [i.name.split(" - ")[1] for i in labelled] == names
    assert [i.name.split(" - ")[0] for i in labelled] == ["#1", "#2", "#3"]