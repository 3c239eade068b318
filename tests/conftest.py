import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


@pytest.fixture
def run_cli():
    """Run ``python -m vsort`` in ``cwd`` and return the CompletedProcess.

    With ``binary=True`` input and output are bytes, and args may be bytes too.
    """

    def _run(cwd: Path, *args, input=None, env=None, check=False, binary=False):
        full_env = {k: v for k, v in os.environ.items() if not k.startswith("VSORT_")}
        full_env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), full_env.get("PYTHONPATH")]))
        full_env["PYTHONIOENCODING"] = "utf-8"
        full_env.update(env or {})
        return subprocess.run(
            [sys.executable, "-m", "vsort", *args],
            cwd=cwd,
            input=input,
            capture_output=True,
            text=not binary,
            encoding=None if binary else "utf-8",
            env=full_env,
            check=check,
        )

    return _run
