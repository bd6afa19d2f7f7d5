"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from configinator.l1_entities.config import LiftConfig
from configinator.l1_entities.errors import ConfigFileNotFoundError

DOCUMENTATION_EXAMPLE = '''\
setup     = ".lift/script_that_downloads_deps.sh"
build     = "gradlew assemble"

# We only care about NULL_DEREFERENCE (from Infer)
# and no-extra-boolean-cast (from ESLint)
importantRules = ["NULL_DEREFERENCE", "no-extra-boolean-cast"]

# Ignore results from test and build directories
ignoreFiles = """
            build/
            src/test/
            """

# Only run infer and eslint (do not run errorprone, hlint, findsecbugs)
tools = [ "infer", "eslint" ]

# Only analyze and post responses to PRs from developers with these usernames
allow = [ "jill", "dave", "shawn" ]

jdk11 = false
'''

# --- Protocol-conforming Fakes ---


class FakeLocator:
    """Fake locator returning a fixed candidate list."""

    def __init__(self, found: list[Path] | None = None) -> None:
        self._found = list(found or [])
        self.locate_calls: list[Path] = []

    def locate(self, root: str | Path) -> list[Path]:
        self.locate_calls.append(Path(root))
        return list(self._found)


class FakeConfigLoader:
    """Fake loader serving records from an in-memory path map."""

    def __init__(self, records: dict[str, LiftConfig] | None = None) -> None:
        self._records = dict(records or {})
        self.load_file_calls: list[Path] = []

    def load_file(self, path: str | Path) -> LiftConfig:
        self.load_file_calls.append(Path(path))
        if str(path) not in self._records:
            raise ConfigFileNotFoundError(path)
        return self._records[str(path)]

    def load_from_directory(self, root: str | Path) -> LiftConfig | None:
        return self._records.get(str(root))


# --- Standard Fixtures ---


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write *content* to *relative* under tmp_path, creating parents."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
        return path

    return _write


@pytest.fixture
def documentation_toml(write_config) -> Path:
    return write_config('.lift.toml', DOCUMENTATION_EXAMPLE)


@pytest.fixture
def full_config() -> LiftConfig:
    return LiftConfig.model_validate(
        {
            'setup': 'echo hi',
            'build': 'make',
            'importantRules': ['A'],
            'ignoreRules': ['B', 'C'],
            'ignoreFiles': 'build/\ndist/',
            'tools': ['infer'],
            'disableTools': ['hlint'],
            'customTools': ['my-tool'],
            'allow': ['amy'],
            'jdk11': True,
            'androidVersion': 30,
            'errorproneBugPatterns': ['DeadException'],
            'summaryComments': False,
        }
    )
