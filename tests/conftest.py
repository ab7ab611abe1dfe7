import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))


@pytest.fixture(scope="session")
def project_root() -> Path:
    return ROOT


@pytest.fixture()
def sample_skills():
    from profile_composer.core import Skill

    return [
        Skill("React.js", "Frontend"),
        Skill("C#", "Backend"),
        Skill("TypeScript", "Frontend"),
    ]
