"""Shared pandoc JSON fixtures."""

import pytest

NO_ATTR = ["", [], []]


def str_json(text):
    return {"t": "Str", "c": text}


def plain_json(*inlines):
    return {"t": "Plain", "c": list(inlines)}


def cell_json(text):
    return [NO_ATTR, {"t": "AlignDefault"}, 1, 1, [plain_json(str_json(text))]]


def row_json(*texts):
    return [NO_ATTR, [cell_json(text) for text in texts]]


def table_json(caption="Results", identifier="tab:results"):
    long_caption = [plain_json(str_json(caption))] if caption else []
    return {
        "t": "Table",
        "c": [
            [identifier, [], []],
            [None, long_caption],
            [
                [{"t": "AlignLeft"}, {"t": "ColWidthDefault"}],
                [{"t": "AlignCenter"}, {"t": "ColWidth", "c": 0.5}],
            ],
            [NO_ATTR, [row_json("A", "B")]],
            [[NO_ATTR, 0, [], [row_json("1", "2")]]],
            [NO_ATTR, []],
        ],
    }


def document_json(blocks, meta=None):
    return {"pandoc-api-version": [1, 23, 1], "meta": meta or {}, "blocks": blocks}


@pytest.fixture
def results_table_json():
    return table_json()


@pytest.fixture
def results_document_json():
    return document_json(
        [
            {"t": "Header", "c": [1, ["intro", [], []], [str_json("Intro")]]},
            {"t": "Para", "c": [str_json("Before"), {"t": "Space"}, str_json("table.")]},
            table_json(),
        ],
        meta={"title": {"t": "MetaInlines", "c": [str_json("Paper")]}},
    )
