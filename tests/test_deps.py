from pathlib import Path

from tola.deps import DEPENDENCY_GRAPH, DependencyGraph


def path(s: str) -> Path:
    return Path(s)


def test_new_graph_has_no_dependents():
    graph = DependencyGraph()
    assert graph.get_dependents(path("/any.typ")) is None


def test_basic_dependency_recording():
    graph = DependencyGraph()
    content = path("/project/content/index.typ")
    template = path("/project/templates/base.typ")

    graph.record_dependencies(content, [template])

    dependents = graph.get_dependents(template)
    assert dependents is not None
    assert content in dependents


def test_self_reference_excluded():
    graph = DependencyGraph()
    content = path("/project/content/index.typ")
    template = path("/project/templates/base.typ")

    graph.record_dependencies(content, [content, template])

    assert graph.get_dependents(content) is None
    assert content in graph.get_dependents(template)


def test_dependency_update_replaces_old():
    graph = DependencyGraph()
    content = path("/project/content/index.typ")
    template1 = path("/project/templates/old.typ")
    template2 = path("/project/templates/new.typ")

    graph.record_dependencies(content, [template1])
    assert graph.get_dependents(template1) == {content}

    graph.record_dependencies(content, [template2])

    assert graph.get_dependents(template1) is None
    assert content in graph.get_dependents(template2)


def test_multiple_content_files_share_dependency():
    graph = DependencyGraph()
    content1 = path("/project/content/a.typ")
    content2 = path("/project/content/b.typ")
    shared = path("/project/templates/shared.typ")

    graph.record_dependencies(content1, [shared])
    graph.record_dependencies(content2, [shared])

    dependents = graph.get_dependents(shared)
    assert len(dependents) == 2
    assert content1 in dependents
    assert content2 in dependents


def test_update_keeps_other_dependents_of_shared_file():
    graph = DependencyGraph()
    content1 = path("/project/content/a.typ")
    content2 = path("/project/content/b.typ")
    shared = path("/project/templates/shared.typ")
    other = path("/project/templates/other.typ")

    graph.record_dependencies(content1, [shared])
    graph.record_dependencies(content2, [shared])
    graph.record_dependencies(content1, [other])

    assert graph.get_dependents(shared) == {content2}
    assert graph.get_dependents(other) == {content1}


def test_clear():
    graph = DependencyGraph()
    template = path("/templates/base.typ")
    graph.record_dependencies(path("/a.typ"), [template])
    graph.record_dependencies(path("/c.typ"), [path("/d.typ")])

    graph.clear()

    assert graph.get_dependents(template) is None
    assert graph.get_dependents(path("/d.typ")) is None


def test_multiple_dependencies_per_file():
    graph = DependencyGraph()
    content = path("/content/index.typ")
    deps = [
        path("/templates/base.typ"),
        path("/utils/helper.typ"),
        path("/utils/date.typ"),
    ]

    graph.record_dependencies(content, deps)

    for dep in deps:
        assert content in graph.get_dependents(dep)


def test_empty_dependencies():
    graph = DependencyGraph()
    content = path("/content/index.typ")

    graph.record_dependencies(content, [])

    assert graph.get_dependents(content) is None


def test_get_nonexistent_returns_none():
    graph = DependencyGraph()
    assert graph.get_dependents(path("/nonexistent.typ")) is None


def test_string_paths_are_accepted():
    graph = DependencyGraph()
    graph.record_dependencies("/content/a.typ", ["/templates/base.typ"])
    assert graph.get_dependents(Path("/templates/base.typ")) == {Path("/content/a.typ")}


def test_returned_dependents_do_not_alias_internal_state():
    graph = DependencyGraph()
    template = path("/templates/base.typ")
    graph.record_dependencies(path("/a.typ"), [template])
    snapshot = graph.get_dependents(template)

    graph.record_dependencies(path("/b.typ"), [template])

    assert snapshot == {path("/a.typ")}
    assert graph.get_dependents(template) == {path("/a.typ"), path("/b.typ")}


def test_global_graph_records_and_clears():
    template = path("/global/templates/base.typ")
    content = path("/global/content/index.typ")
    DEPENDENCY_GRAPH.record_dependencies(content, [template])
    try:
        assert DEPENDENCY_GRAPH.get_dependents(template) == {content}
    finally:
        DEPENDENCY_GRAPH.clear()
    assert DEPENDENCY_GRAPH.get_dependents(template) is None