import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'transedit' and tests/ as 'helpers'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from transedit.core.stdlib_logging import reset_stdlib_logging_for_tests
from helpers.projects import TranslationProject


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch):
    """Drop TRANSEDIT_* overrides from the developer environment."""
    for key in list(os.environ):
        if key.startswith("TRANSEDIT_"):
            monkeypatch.delenv(key, raising=False)
    yield
    reset_stdlib_logging_for_tests()


@pytest.fixture
def translation_project(tmp_path, monkeypatch) -> TranslationProject:
    """Empty project rooted at tmp_path (also the working directory)."""
    monkeypatch.chdir(tmp_path)
    return TranslationProject(tmp_path)


@pytest.fixture
def flat_project(translation_project: TranslationProject) -> TranslationProject:
    """JSON project without namespaces: one file per locale (en, de, fr)."""
    project = translation_project
    project.configure(base_locale="en", namespaces=False)
    project.write("strings.i18n.json", {
        "login": {"title": "Login", "button": "Sign in"},
        "welcome": "Welcome",
    })
    project.write("strings_de.i18n.json", {
        "login": {"title": "Anmelden", "button": "Einloggen"},
        "welcome": "Willkommen",
    })
    project.write("strings_fr.i18n.json", {
        "login": {"title": "Connexion"},
        "welcome": "Bienvenue",
    })
    return project


@pytest.fixture
def namespaced_project(translation_project: TranslationProject) -> TranslationProject:
    """JSON project with namespaces 'login' and 'auth' in locales en and de."""
    project = translation_project
    project.configure(base_locale="en", namespaces=True)
    project.write("login_en.i18n.json", {"title": "Login", "forgot": "Forgot password?"})
    project.write("login_de.i18n.json", {"title": "Anmelden", "forgot": "Passwort vergessen?"})
    project.write("auth_en.i18n.json", {"logout": "Log out"})
    project.write("auth_de.i18n.json", {"logout": "Abmelden"})
    return project
