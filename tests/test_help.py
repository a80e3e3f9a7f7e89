"""
Tests for help cataloging and the grouped listing.
"""

import logging
import os

import pytest

from yeoman_generators.core.context import EngineContext
from yeoman_generators.core.engine.search_roots import SearchRoots
from yeoman_generators.core.models.generator import GeneratorSummary
from yeoman_generators.core.use_cases.help import (
    HIDDEN_NAMESPACES,
    build_listing,
    catalog,
    help_listing,
    lookup_help,
)

DUCK_SOURCE = """\
class Generator:
    def __init__(self, args, options, config):
        self.arguments = []
        self.hooks = []

    def source_root(self, path=None):
        return None

    def help(self):
        return "duck"

    def run(self, args=None, callback=None):
        pass
"""


def _summary(namespace: str, fullpath: str | None = None) -> GeneratorSummary:
    return GeneratorSummary(
        root="", path="", fullpath=fullpath or f"/{namespace}", namespace=namespace
    )


class TestLookupHelp:
    def test_finds_index_modules_in_both_sub_bases(self, engine, app_root, write_generator):
        write_generator(app_root, "lib/generators/mocha/app/index.py")
        write_generator(app_root, "lib/yeoman/generators/jasmine/index.py")

        found = lookup_help(engine, app_root, [], {}, {})
        assert [s.namespace for s in found] == ["jasmine", "mocha:app"]
        assert found[1].fullpath == str(app_root / "lib" / "generators" / "mocha" / "app" / "index.py")
        assert found[1].path == os.path.join("mocha", "app", "index.py")

    def test_templates_directory_skipped(self, engine, app_root, write_generator):
        write_generator(app_root, "lib/generators/mocha/index.py")
        write_generator(
            app_root,
            "lib/generators/mocha/templates/index.py",
            source="raise AssertionError('template assets are never loaded')\n",
        )
        found = lookup_help(engine, app_root, [], {}, {})
        assert [s.namespace for s in found] == ["mocha"]

    def test_flat_modules_not_cataloged(self, engine, app_root, write_generator):
        write_generator(app_root, "lib/generators/flat.py")
        assert lookup_help(engine, app_root, [], {}, {}) == []

    def test_non_generators_excluded(self, engine, app_root, write_generator):
        write_generator(app_root, "lib/generators/util/index.py", source="VALUE = 1\n")
        write_generator(app_root, "lib/generators/plain/index.py", source="class Generator:\n    def __init__(self, *args):\n        pass\n")
        write_generator(app_root, "lib/generators/real/index.py")
        found = lookup_help(engine, app_root, [], {}, {})
        assert [s.namespace for s in found] == ["real"]

    def test_structural_generator_accepted(self, engine, app_root, write_generator):
        write_generator(app_root, "lib/generators/duck/index.py", source=DUCK_SOURCE)
        found = lookup_help(engine, app_root, [], {}, {})
        assert [s.namespace for s in found] == ["duck"]
        assert found[0].instance.help() == "duck"

    def test_sorted_by_namespace(self, engine, app_root, write_generator):
        for name in ("zeta", "alpha", "mid:b", "mid:a"):
            write_generator(app_root, f"lib/generators/{name.replace(':', '/')}/index.py")
        found = lookup_help(engine, app_root, [], {}, {})
        assert [s.namespace for s in found] == ["alpha", "mid:a", "mid:b", "zeta"]

    def test_missing_shared_dependency_is_reported(
        self, engine, app_root, write_generator, caplog
    ):
        write_generator(
            app_root,
            "lib/generators/orphan/index.py",
            source="raise ModuleNotFoundError(\"No module named 'yeoman_generators'\", "
                   "name='yeoman_generators')\n",
        )
        write_generator(app_root, "lib/generators/fine/index.py")

        with caplog.at_level(logging.ERROR):
            found = lookup_help(engine, app_root, [], {}, {})

        assert [s.namespace for s in found] == ["fine"]
        assert "[Error] loading generator" in caplog.text

    def test_other_missing_module_propagates(self, engine, app_root, write_generator):
        write_generator(app_root, "lib/generators/bad/index.py", source="import not_installed_abc_123\n")
        with pytest.raises(ModuleNotFoundError):
            lookup_help(engine, app_root, [], {}, {})

    def test_genuine_error_propagates(self, engine, app_root, write_generator):
        write_generator(app_root, "lib/generators/bad/index.py", source="raise KeyError('x')\n")
        with pytest.raises(KeyError):
            lookup_help(engine, app_root, [], {}, {})


class TestCatalog:
    def test_roots_in_order(self, engine, app_root, builtin_root, make_plugin, write_generator):
        plugin = make_plugin("yeoman-p")
        engine.roots.add_plugin(plugin)
        write_generator(builtin_root, "lib/generators/a_builtin/index.py")
        write_generator(plugin, "lib/generators/b_plugin/index.py")
        write_generator(app_root, "lib/generators/c_local/index.py")

        found = catalog(engine, [], {}, {})
        assert [s.namespace for s in found] == ["c_local", "b_plugin", "a_builtin"]

    def test_same_file_listed_once(self, engine, app_root, write_generator):
        write_generator(app_root, "lib/generators/shared/index.py")
        link = app_root / "plugins" / "yeoman-self"
        link.parent.mkdir()
        os.symlink(app_root, link)
        engine.roots.add_plugin(link)

        found = catalog(engine, [], {}, {})
        assert [s.namespace for s in found] == ["shared"]
        assert build_listing(found).groups == {"yeoman": [], "shared": ["shared"]}


    def test_symlinked_generator_directory(self, engine, app_root, make_plugin, write_generator, tmp_path):
        plugin = make_plugin("yeoman-linked")
        engine.roots.add_plugin(plugin)
        write_generator(tmp_path, "vendor/mocha/model/index.py")
        (plugin / "lib" / "generators").mkdir(parents=True)
        os.symlink(tmp_path / "vendor" / "mocha", plugin / "lib" / "generators" / "mocha")

        found = catalog(engine, [], {}, {})
        assert [s.namespace for s in found] == ["mocha:model"]

    def test_symlink_cycle_walked_once(self, engine, app_root, write_generator):
        write_generator(app_root, "lib/generators/mocha/model/index.py")
        os.symlink(app_root / "lib" / "generators", app_root / "lib" / "generators" / "mocha" / "loop")

        found = lookup_help(engine, app_root, [], {}, {})
        assert [s.namespace for s in found] == ["mocha:model"]


class TestBuildListing:
    def test_groups_and_order(self):
        summaries = [
            _summary(ns)
            for ns in [
                "yeoman:app", "yeoman:readme", "mocha:app", "mocha:model",
                "yeoman:gitignore", "sass:app", "zeta:x", "alpha:y",
            ]
        ]
        listing = build_listing(summaries)
        assert list(listing.groups) == ["yeoman", "mocha", "zeta", "alpha"]
        assert listing.groups["yeoman"] == ["readme", "gitignore"]
        assert listing.groups["mocha"] == ["mocha:model"]

    def test_hidden_never_listed(self):
        listing = build_listing([_summary(ns) for ns in sorted(HIDDEN_NAMESPACES)])
        assert listing.groups == {"yeoman": []}

    def test_duplicate_namespaces_collapsed(self):
        listing = build_listing([_summary("mocha:model", "/a"), _summary("mocha:model", "/b")])
        assert listing.groups["mocha"] == ["mocha:model"]

    def test_render(self):
        text = build_listing([_summary("yeoman:readme"), _summary("mocha:model")]).render()
        assert text.startswith("Usage: yeoman generate GENERATOR [args] [options]")
        assert "Yeoman:\n  readme\n" in text
        assert "Mocha:\n  mocha:model\n" in text
        assert text.index("Yeoman:") < text.index("Mocha:")


class TestBuiltinListing:
    def test_only_builtins_without_plugins(self, app_root):
        engine = EngineContext(base=app_root, roots=SearchRoots(local=app_root))
        listing = help_listing(engine, [], {}, {})
        assert listing.groups == {"yeoman": ["gitignore", "readme"]}
        assert "Yeoman:\n  gitignore\n  readme\n" in listing.render()

    def test_hidden_local_generator_loads_but_is_not_listed(self, app_root, write_generator):
        write_generator(app_root, "lib/generators/yeoman/app/index.py")
        engine = EngineContext(base=app_root, roots=SearchRoots(local=app_root))
        summaries = lookup_help(engine, app_root, [], {}, {})
        assert [s.namespace for s in summaries] == ["yeoman:app"]
        assert "app" not in build_listing(summaries).groups["yeoman"]
