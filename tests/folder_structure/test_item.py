"""Unit tests for tree items and sibling ordering."""

from fs_tools.folder_structure.annotation import annotate
from fs_tools.folder_structure.item import FileItem, FolderItem, sort_items


def test_file_item():
    item = FileItem("main.rs")
    assert item.name == "main.rs"
    assert not item.is_folder
    assert item.has_visible_file is True
    assert item.is_annotated
    assert item.children == ()


def test_folder_item_adopts_children():
    lib = FileItem("lib.rs")
    util = FolderItem("util", [FileItem("mod.rs")])
    folder = FolderItem("src", [util, lib])

    assert folder.is_folder
    assert folder.children == (util, lib)
    assert lib.parent is folder
    assert util.parent is folder
    assert folder.parent is None


def test_folder_item_starts_unannotated():
    folder = FolderItem("src")
    assert folder.has_visible_file is None
    assert not folder.is_annotated


def test_folder_item_is_annotated_after_annotate():
    folder = FolderItem("src", [FolderItem("empty")])
    annotate(folder)
    assert folder.is_annotated
    assert folder.children[0].is_annotated
    assert folder.children[0].has_visible_file is False


def test_empty_folder_item():
    assert FolderItem("empty").children == ()


def test_repr():
    assert repr(FileItem("a.txt")) == "FileItem('a.txt')"
    assert repr(FolderItem("d", [FileItem("a.txt")])) == "FolderItem('d', [FileItem('a.txt')])"


def test_sort_folders_before_files():
    items = [FileItem("a.txt"), FolderItem("z"), FileItem("0.txt"), FolderItem("b")]
    assert [item.name for item in sort_items(items)] == ["b", "z", "0.txt", "a.txt"]


def test_sort_is_case_sensitive_code_point_order():
    items = [FileItem("b.txt"), FileItem("B.txt"), FileItem("a.txt"), FileItem("_.txt")]
    assert [item.name for item in sort_items(items)] == ["B.txt", "_.txt", "a.txt", "b.txt"]


def test_sort_is_independent_of_input_order():
    names = ["delta", "alpha", "charlie", "bravo"]
    forward = sort_items([FileItem(name) for name in names])
    backward = sort_items([FileItem(name) for name in reversed(names)])
    assert [item.name for item in forward] == [item.name for item in backward]


def test_sort_returns_tuple():
    assert sort_items([]) == ()
