from __future__ import annotations

import pytest

from transedit.core.edit import ActionKind, EditEngine, EditOperation
from transedit.core.exceptions import TreeTypeError

from helpers.projects import TranslationProject


def _engine(project: TranslationProject) -> EditEngine:
    return EditEngine(project.collection())


class TestMove:
    def test_rename_updates_key_in_place_in_every_locale(self, flat_project: TranslationProject) -> None:
        result = _engine(flat_project).move("login.title", "login.heading")

        assert result.rename is True
        assert list(flat_project.read("strings.i18n.json")["login"].items()) == [
            ("heading", "Login"),
            ("button", "Sign in"),
        ]
        assert flat_project.read("strings_de.i18n.json")["login"]["heading"] == "Anmelden"
        assert flat_project.read("strings_fr.i18n.json")["login"] == {"heading": "Connexion"}
        assert len(result.touched_files) == 3

    def test_rename_twice_finds_nothing_the_second_time(self, flat_project: TranslationProject) -> None:
        _engine(flat_project).move("login.title", "login.heading")
        snapshot = flat_project.raw("strings_de.i18n.json")

        result = _engine(flat_project).move("login.title", "login.heading")

        assert not result.found
        assert result.summary() == "No origin values found."
        assert flat_project.raw("strings_de.i18n.json") == snapshot

    def test_rename_uses_the_destination_key_verbatim(self, translation_project: TranslationProject) -> None:
        project = translation_project
        project.configure(base_locale="en")
        project.write("strings.i18n.json", {"title(rich)": "<b>Hi</b>", "other": "x"})

        _engine(project).move("title", "heading")

        assert project.read("strings.i18n.json") == {"heading": "<b>Hi</b>", "other": "x"}

    def test_relocate_moves_value_to_new_parent(self, flat_project: TranslationProject) -> None:
        result = _engine(flat_project).move("login.button", "actions.submit")

        assert result.rename is False
        en = flat_project.read("strings.i18n.json")
        assert en["login"] == {"title": "Login"}
        assert en["actions"] == {"submit": "Sign in"}
        assert flat_project.read("strings_de.i18n.json")["actions"] == {"submit": "Einloggen"}

    def test_relocate_reports_files_without_the_key(self, flat_project: TranslationProject) -> None:
        before = flat_project.raw("strings_fr.i18n.json")

        result = _engine(flat_project).move("login.button", "actions.submit")

        not_found = [a for a in result.actions if a.kind is ActionKind.NOT_FOUND]
        assert [a.path.name for a in not_found] == ["strings_fr.i18n.json"]
        assert flat_project.raw("strings_fr.i18n.json") == before

    def test_moving_a_whole_subtree(self, flat_project: TranslationProject) -> None:
        _engine(flat_project).move("login", "pages.login")

        de = flat_project.read("strings_de.i18n.json")
        assert "login" not in de
        assert de["pages"]["login"] == {"title": "Anmelden", "button": "Einloggen"}


class TestCopy:
    def test_copy_leaves_the_origin_in_place(self, flat_project: TranslationProject) -> None:
        result = _engine(flat_project).copy("welcome", "greeting")

        assert result.operation is EditOperation.COPY
        for name in ("strings.i18n.json", "strings_de.i18n.json", "strings_fr.i18n.json"):
            data = flat_project.read(name)
            assert data["greeting"] == data["welcome"]

    def test_copied_subtrees_are_independent(self, flat_project: TranslationProject) -> None:
        engine = _engine(flat_project)
        engine.copy("login", "signup")
        engine.move("signup.title", "signup.heading")

        en = flat_project.read("strings.i18n.json")
        assert en["login"] == {"title": "Login", "button": "Sign in"}
        assert en["signup"] == {"heading": "Login", "button": "Sign in"}

    def test_copy_of_missing_key(self, flat_project: TranslationProject) -> None:
        result = _engine(flat_project).copy("nope", "other")
        assert result.summary() == "No origin values found."

    def test_copy_into_a_scalar_raises(self, flat_project: TranslationProject) -> None:
        with pytest.raises(TreeTypeError):
            _engine(flat_project).copy("login.title", "welcome.title")


class TestDelete:
    def test_delete_removes_entry_everywhere(self, flat_project: TranslationProject) -> None:
        result = _engine(flat_project).delete("login.button")

        assert "button" not in flat_project.read("strings.i18n.json")["login"]
        assert "button" not in flat_project.read("strings_de.i18n.json")["login"]
        assert [a.kind for a in result.actions] == [
            ActionKind.DELETE,
            ActionKind.DELETE,
            ActionKind.NOT_FOUND,
        ]
        assert result.summary() == "Updated 2 files."

    def test_delete_missing_key_touches_nothing(self, flat_project: TranslationProject) -> None:
        before = flat_project.raw("strings.i18n.json")

        result = _engine(flat_project).delete("login.missing")

        assert result.summary() == "Nothing changed."
        assert flat_project.raw("strings.i18n.json") == before


class TestOutdated:
    def test_flags_every_locale_except_the_base(self, flat_project: TranslationProject) -> None:
        result = _engine(flat_project).outdated("login.title")

        assert flat_project.read("strings.i18n.json")["login"] == {"title": "Login", "button": "Sign in"}
        assert list(flat_project.read("strings_de.i18n.json")["login"]) == ["title(OUTDATED)", "button"]
        assert flat_project.read("strings_fr.i18n.json")["login"] == {"title(OUTDATED)": "Connexion"}
        assert {a.path.name for a in result.actions} == {"strings_de.i18n.json", "strings_fr.i18n.json"}

    def test_flagging_twice_adds_the_modifier_once(self, flat_project: TranslationProject) -> None:
        engine = _engine(flat_project)
        engine.outdated("welcome")
        engine.outdated("welcome")

        assert flat_project.read("strings_de.i18n.json")["welcome(OUTDATED)"] == "Willkommen"
        assert "welcome(OUTDATED, OUTDATED)" not in flat_project.raw("strings_de.i18n.json")

    def test_existing_modifiers_are_kept(self, flat_project: TranslationProject) -> None:
        flat_project.write("strings_de.i18n.json", {"welcome(rich)": "<b>Willkommen</b>"})

        _engine(flat_project).outdated("welcome")

        assert flat_project.read("strings_de.i18n.json") == {"welcome(rich, OUTDATED)": "<b>Willkommen</b>"}


class TestAdd:
    def test_add_writes_only_the_given_locale(self, flat_project: TranslationProject) -> None:
        result = _engine(flat_project).add("fr", "login.button", "Se connecter")

        assert flat_project.read("strings_fr.i18n.json")["login"] == {
            "title": "Connexion",
            "button": "Se connecter",
        }
        assert [a.path.name for a in result.actions] == ["strings_fr.i18n.json"]

    def test_add_creates_parents(self, flat_project: TranslationProject) -> None:
        _engine(flat_project).add("de", "settings.privacy.title", "Datenschutz")
        assert flat_project.read("strings_de.i18n.json")["settings"] == {"privacy": {"title": "Datenschutz"}}

    def test_add_for_unknown_locale_changes_nothing(self, flat_project: TranslationProject) -> None:
        result = _engine(flat_project).add("it", "welcome", "Benvenuto")
        assert result.actions == []
        assert result.summary() == "Nothing changed."


def test_yaml_files_keep_their_key_order(translation_project: TranslationProject) -> None:
    project = translation_project
    project.configure(base_locale="en", input_file_pattern=".i18n.yaml")
    project.write("strings.i18n.yaml", {"zeta": "Z", "alpha": {"beta": "B", "gamma": "G"}})

    EditEngine(project.collection()).move("alpha.beta", "alpha.delta")

    raw = project.raw("strings.i18n.yaml")
    assert raw.index("zeta") < raw.index("alpha") < raw.index("delta") < raw.index("gamma")


FLAT_FILES = ("strings.i18n.json", "strings_de.i18n.json", "strings_fr.i18n.json")


def test_rename_and_back_restores_every_file(flat_project: TranslationProject) -> None:
    before = {name: flat_project.raw(name) for name in FLAT_FILES}
    engine = _engine(flat_project)

    engine.move("login.title", "login.heading")
    assert all(flat_project.raw(name) != before[name] for name in FLAT_FILES)
    engine.move("login.heading", "login.title")

    assert {name: flat_project.raw(name) for name in FLAT_FILES} == before


class TestListElements:
    @pytest.fixture
    def project(self, translation_project: TranslationProject) -> TranslationProject:
        translation_project.configure(base_locale="en")
        translation_project.write("strings.i18n.json", {"pages": ["First", "Second"]})
        translation_project.write("strings_de.i18n.json", {"pages": ["Erste", "Zweite"]})
        return translation_project

    def test_renaming_an_index_changes_nothing(self, project: TranslationProject) -> None:
        before = project.raw("strings.i18n.json")

        result = _engine(project).move("pages.0", "pages.5")

        assert not result.found
        assert {a.kind for a in result.actions} == {ActionKind.NOT_FOUND}
        assert project.raw("strings.i18n.json") == before

    def test_flagging_a_list_element_changes_nothing(self, project: TranslationProject) -> None:
        before = project.raw("strings_de.i18n.json")

        result = _engine(project).outdated("pages.0")

        assert not result.found
        assert [a.kind for a in result.actions] == [ActionKind.NOT_FOUND]
        assert project.raw("strings_de.i18n.json") == before
