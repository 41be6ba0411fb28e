"""Tests for the text renderers."""

from click import unstyle

from module_graph.formatter import pretty_circular, pretty_tree, pretty_warning
from module_graph.models import Dependency


def _tree():
    return {
        "a": [
            Dependency("./b", "a", "b"),
            Dependency("x", "a", None),
        ],
        "b": [Dependency("./a", "b", "a"), Dependency("./c", "b", "c")],
        "c": None,
    }


def test_pretty_tree_cyclic():
    text = unstyle(pretty_tree(_tree(), ["a"]))
    assert text.splitlines() == [
        "  - 0) a",
        "      - 1) b",
        "      ·   - 0) a",
        "      ·   - 2) c",
        "      - 3) x",
    ]


def test_pretty_tree_repeat_keeps_first_id():
    tree = {
        "a": [Dependency("./b", "a", "b")],
        "b": [],
    }
    text = unstyle(pretty_tree(tree, ["a", "b", "a"]))
    assert text.splitlines() == [
        "  - 0) a",
        "  ·   - 1) b",
        "  - 1) b",
        "  - 0) a",
    ]


def test_pretty_tree_zero_padding():
    tree = {f"m{i:02d}": [] for i in range(11)}
    lines = unstyle(pretty_tree(tree, list(tree))).splitlines()
    assert lines[0] == "  - 00) m00"
    assert lines[10] == "  - 10) m10"


def test_pretty_tree_styles_leaves():
    rendered = pretty_tree({"a": None, "b": []}, ["a", "b"])
    assert rendered != unstyle(rendered)
    assert "\x1b[93m" in rendered.splitlines()[0]


def test_pretty_circular():
    text = unstyle(pretty_circular([["a", "b"], ["c"]], prefix=""))
    assert text == "1) a -> b\n2) c"


def test_pretty_warning_numbering():
    warnings = [f"w{i}" for i in range(12)]
    lines = unstyle(pretty_warning(warnings)).splitlines()
    assert lines[0] == "  01) w0"
    assert lines[11] == "  12) w11"


def test_empty_inputs():
    assert pretty_circular([]) == ""
    assert pretty_warning([]) == ""
    assert pretty_tree({}, []) == ""


def test_pretty_tree_deep_chain():
    depth = 3000
    tree = {
        f"m{i}": [Dependency(f"./m{i + 1}", f"m{i}", f"m{i + 1}")] if i < depth else []
        for i in range(depth + 1)
    }
    lines = unstyle(pretty_tree(tree, ["m0"])).splitlines()
    assert len(lines) == depth + 1
    assert lines[-1].strip() == f"- {depth}) m{depth}"
    assert lines[-1].startswith(" " * (2 + 4 * depth))
