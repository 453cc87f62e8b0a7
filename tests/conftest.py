import importlib.util
import sys

import pytest


@pytest.fixture
def import_source(tmp_path):
    """Write generated source to a file and import it as a module."""
    names = []

    def load(source, name):
        path = tmp_path / f"{name}.py"
        path.write_text(source, encoding="utf-8")
        spec = importlib.util.spec_from_file_location(name, path)
        module = importlib.util.module_from_spec(spec)
        # dataclasses resolves the defining module through sys.modules
        sys.modules[name] = module
        names.append(name)
        spec.loader.exec_module(module)
        return module

    yield load
    for name in names:
        sys.modules.pop(name, None)
