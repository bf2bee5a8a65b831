"""The library packages stay free of the demo's rendering dependency."""
from __future__ import annotations

import subprocess
import sys


def test_library_packages_do_not_import_pygame() -> None:
    """pygame is only needed by the demo, so importing the engine must not load it."""
    code = (
        "import sys\n"
        "import glide, glide_path, glide_tween\n"
        "assert 'pygame' not in sys.modules, 'pygame was imported'\n"
    )
    result = subprocess.run(
        [sys.executable, "-c", code], capture_output=True, text=True
    )
    assert result.returncode == 0, result.stderr
