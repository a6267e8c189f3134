import io
import json
from pathlib import Path

import pytest

from katas.vault import (
    PasswordVault,
    VaultError,
    add_password,
    create_vault,
    fetch_password,
    load_vault,
    main,
    save_vault,
    sign_in,
)


@pytest.fixture(autouse=True)
def _in_tmp_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_create_vault_round_trip():
    password = "password"
    vault = create_vault("myvault", password, password)
    assert vault == PasswordVault("myvault", password)
    assert load_vault("myvault") == vault


def test_create_vault_trims_input():
    password = "password"
    vault = create_vault("  myvault \n", password + "\n", password + "\n")
    assert vault.name == "myvault"
    assert vault.password == password
    assert Path("myvault").exists()


def test_create_vault_mismatch():
    password = "password"
    confirmation = "secret"
    with pytest.raises(VaultError, match="Password not matched"):
        create_vault("myvault", password, confirmation)
    assert not Path("myvault").exists()


def test_stored_format_uses_field_names():
    password = "password"
    vault = create_vault("myvault", password, password)
    assert vault == PasswordVault("myvault", password)
    text = Path("myvault").read_text()
    assert json.loads(text) == {"Name": vault.name, "Password": vault.password}
    assert json.loads(text) == {"Name": "myvault", "Password": password}
    assert " " not in text


def test_save_and_load_round_trip():
    password = "secret"
    vault = PasswordVault("other", password)
    save_vault("other", vault)
    assert load_vault("other") == vault


def test_load_matches_keys_without_case():
    password = "token"
    Path("v").write_text(json.dumps({"name": "v", "PASSWORD": password}))
    assert load_vault("v") == PasswordVault("v", password)


def test_load_missing_file():
    with pytest.raises(VaultError):
        load_vault("absent")


def test_load_corrupt_file():
    Path("broken").write_text("not json")
    with pytest.raises(VaultError):
        load_vault("broken")


def test_sign_in_success():
    password = "password"
    create_vault("myvault", password, password)
    assert sign_in(" myvault\n", password + "\n") == "myvault"


def test_sign_in_wrong_password():
    password = "password"
    create_vault("myvault", password, password)
    wrong = "secret"
    with pytest.raises(VaultError, match="Invalid vault name or password."):
        sign_in("myvault", wrong)


def test_sign_in_missing_vault():
    password = "password"
    with pytest.raises(VaultError):
        sign_in("absent", password)


def test_add_password_then_fetch():
    password = "password"
    create_vault("myvault", password, password)
    replacement = "secret"
    updated = add_password("myvault", replacement + "\n")
    assert updated == PasswordVault("myvault", replacement)
    assert fetch_password("myvault") == replacement


def test_add_password_to_missing_vault_starts_empty():
    password = "token"
    add_password("fresh", password)
    assert load_vault("fresh") == PasswordVault("", password)


def test_add_password_requires_vault_name():
    password = "token"
    with pytest.raises(VaultError):
        add_password("", password)


def test_fetch_missing_vault():
    with pytest.raises(VaultError):
        fetch_password("absent")


def test_main_full_session(monkeypatch, capsys):
    password = "password"
    script = "\n".join(
        ["1", "myvault", password, password, "2", "myvault", password, "4", "q"]
    ) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main() == 0
    out = capsys.readouterr().out
    assert "Signed into the vault successfully..!" in out
    assert f"Password obtained from  myvault is  {password}" in out


def test_main_bad_sign_in(monkeypatch, capsys):
    password = "password"
    wrong = "secret"
    script = "\n".join(
        ["1", "myvault", password, password, "2", "myvault", wrong]
    ) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(script))
    assert main() == 1
    assert "Invalid vault name or password." in capsys.readouterr().out


def test_main_quits_on_end_of_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main() == 0
    assert not list(Path(".").iterdir())