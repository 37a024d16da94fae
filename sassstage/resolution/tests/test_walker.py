import asyncio

import pytest

from sassstage.exceptions import ErrorCode, ImportAmbiguous, ImportNotFound
from sassstage.resolution.classes import ResolvedImport
from sassstage.resolution.existence import ExistenceResolver
from sassstage.resolution.located import InGraph, Located
from sassstage.resolution.walker import LoadPathWalker


class MockResolver:
    """A fake existence resolver that serves pre-defined files and counts queries."""

    def __init__(self, available_files: dict):
        self.available_files = available_files
        self.queried = []

    async def check(self, located: Located):
        self.queried.append(located.absolute_path)
        if located.absolute_path in self.available_files:
            return ResolvedImport(absolute_path=located.absolute_path, contents=self.available_files[located.absolute_path], origin="disk")
        return None


def resolve(walker, specifier, importer="/proj/a/entry.scss"):
    return asyncio.run(walker.resolve(specifier, importer))


def test_partial_in_importer_directory_is_found():
    resolver = MockResolver({"/proj/a/_foo.scss": "$foo: 1;"})
    walker = LoadPathWalker(resolver)

    resolved = resolve(walker, "foo")

    assert resolved.absolute_path == "/proj/a/_foo.scss"
    assert resolved.contents == "$foo: 1;"


def test_search_directories_start_with_importer_directory():
    walker = LoadPathWalker(MockResolver({}), load_paths=["/lib/one", "/lib/two"])
    assert walker.search_directories("/proj/a/entry.scss") == ["/proj/a", "/lib/one", "/lib/two"]


@pytest.mark.parametrize("k", [1, 2, 3])
def test_first_directory_with_a_single_match_wins_and_later_ones_are_not_queried(k):
    directories = ["/proj/a", "/lib/one", "/lib/two", "/lib/three"]
    winner = f"{directories[k - 1]}/_grid.scss"
    # Every directory after k also has a match that must never be seen.
    files = {winner: "winner"}
    for later in directories[k:]:
        files[f"{later}/grid.scss"] = "later"

    resolver = MockResolver(files)
    walker = LoadPathWalker(resolver, load_paths=directories[1:])

    resolved = resolve(walker, "grid")

    assert resolved.absolute_path == winner
    assert len(resolver.queried) == 4 * k
    assert not any(path.startswith(tuple(d + "/" for d in directories[k:])) for path in resolver.queried)


def test_ambiguous_directory_fails_even_if_a_later_directory_has_a_single_match():
    resolver = MockResolver(
        {
            "/lib/one/_grid.scss": "a",
            "/lib/one/grid.sass": "b",
            "/lib/two/_grid.scss": "c",
        }
    )
    walker = LoadPathWalker(resolver, load_paths=["/lib/one", "/lib/two"])

    with pytest.raises(ImportAmbiguous) as exc_info:
        resolve(walker, "grid")

    error = exc_info.value
    assert error.code == ErrorCode.IMPORT_AMBIGUOUS
    assert error.candidates == ["/lib/one/_grid.scss", "/lib/one/grid.sass"]
    assert error.importer == "/proj/a/entry.scss"
    assert error.specifier == "grid"
    assert "/lib/one/_grid.scss" in str(error) and "/lib/one/grid.sass" in str(error)
    assert not any(path.startswith("/lib/two/") for path in resolver.queried)


def test_partial_and_standalone_with_extension_are_ambiguous():
    resolver = MockResolver({"/proj/a/_btn.scss": "a", "/proj/a/btn.scss": "b"})
    with pytest.raises(ImportAmbiguous):
        resolve(LoadPathWalker(resolver), "btn.scss")


def test_nothing_found_anywhere_raises_not_found():
    resolver = MockResolver({})
    walker = LoadPathWalker(resolver, load_paths=["/lib"])

    with pytest.raises(ImportNotFound) as exc_info:
        resolve(walker, "missing")

    assert exc_info.value.code == ErrorCode.IMPORT_NOT_FOUND
    assert exc_info.value.specifier == "missing"
    assert str(exc_info.value) == "File to import not found or unreadable: missing"
    assert len(resolver.queried) == 8


def test_relative_importer_is_rejected_before_any_lookup():
    resolver = MockResolver({"/proj/a/_foo.scss": "$foo: 1;"})

    with pytest.raises(ValueError, match="absolute path"):
        resolve(LoadPathWalker(resolver), "foo", importer="a/entry.scss")

    assert resolver.queried == []


def test_candidates_under_the_graph_root_are_located_in_the_graph():
    seen = []

    class RecordingResolver(MockResolver):
        async def check(self, located):
            seen.append(located)
            return await super().check(located)

    walker = LoadPathWalker(RecordingResolver({"/proj/a/_foo.scss": "x"}), graph_root="/proj")
    resolve(walker, "foo")

    assert all(isinstance(located, InGraph) for located in seen)
    assert seen[0].relative_path == "a/_foo.scss"


def test_walker_with_real_resolver_reads_load_path_from_disk(tmp_path):
    project = tmp_path / "project"
    library = tmp_path / "library"
    project.mkdir()
    (library / "theme").mkdir(parents=True)
    (library / "theme" / "_colors.scss").write_text("$brand: #c0ffee;")

    walker = LoadPathWalker(ExistenceResolver(None), load_paths=[str(library)])
    resolved = asyncio.run(walker.resolve("theme/colors", str(project / "main.scss")))

    assert resolved.absolute_path == str(library / "theme" / "_colors.scss")
    assert resolved.contents == "$brand: #c0ffee;"
