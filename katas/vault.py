"""A tiny password vault stored as a JSON file named after the vault."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

MENU = (
    "What would you like to do?",
    "1. Create a new password vault",
    "2. Sign in to a password vault",
    "3. Add a password to a vault",
    "4. Fetch a password from a vault",
    "Quit (enter q or quit)",
)

_ASK_NAME = "Please provide a name for the vault: "
_ASK_MASTER = "Please enter a master password: "
_ASK_CONFIRM = "Please confirm the master password: "
_ASK_VAULT = "Enter the vault name: "
_ASK_VAULT_KEY = "Enter the vault password: "
_ASK_NEW_ENTRY = "Enter the password to add in the vault : "


class VaultError(Exception):
    """Raised when a vault cannot be created, read or opened."""


@dataclass
class PasswordVault:
    name: str = ""
    password: str = ""

    def to_json(self) -> str:
        """Serialise with the field names ``Name`` and ``Password``."""
        return json.dumps(
            {"Name": self.name, "Password": self.password},
            separators=(",", ":"),
            ensure_ascii=False,
        )

    @classmethod
    def from_json(cls, text: str) -> "PasswordVault":
        """Parse a vault, matching field names without regard to case."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as err:
            raise VaultError(f"Error reading data: {err}") from err
        if not isinstance(data, dict):
            raise VaultError("Error reading data: expected a JSON object")
        vault = cls()
        for key, value in data.items():
            attribute = {"name": "name", "password": "password"}.get(key.lower())
            if attribute is None:
                continue
            if not isinstance(value, str):
                raise VaultError(f"Error reading data: field {key!r} is not a string")
            setattr(vault, attribute, value)
        return vault


def save_vault(filename: PathLike, vault: PasswordVault) -> None:
    """Write ``vault`` to ``filename`` as JSON."""
    try:
        Path(filename).write_text(vault.to_json(), encoding="utf-8")
    except OSError as err:
        raise VaultError(f"Error creating file: {err}") from err


def load_vault(filename: PathLike) -> PasswordVault:
    """Read the vault stored in ``filename``."""
    try:
        text = Path(filename).read_text(encoding="utf-8")
    except OSError as err:
        raise VaultError(f"Error reading input: {err}") from err
    return PasswordVault.from_json(text)


def create_vault(name: str, password: str, confirmation: str) -> PasswordVault:
    """Create a vault file named after the vault, guarded by a master password."""
    if confirmation != password:
        raise VaultError("Password not matched")
    vault = PasswordVault(name.strip(), password.strip())
    save_vault(vault.name, vault)
    return vault


def sign_in(name: str, password: str) -> str:
    """Check the credentials of a vault and return its name."""
    name = name.strip()
    vault = load_vault(name)
    if vault.name == name and vault.password == password.strip():
        return vault.name
    raise VaultError("Invalid vault name or password.")


def add_password(name: str, password: str) -> PasswordVault:
    """Store ``password`` in the vault ``name``, replacing the previous one."""
    if not name:
        raise VaultError("Not signed in to a vault")
    try:
        vault = load_vault(name)
    except VaultError:
        vault = PasswordVault()
    vault.password = password.strip()
    save_vault(name, vault)
    return vault


def fetch_password(name: str) -> str:
    """Return the password kept in the vault ``name``."""
    return load_vault(name).password


def main(argv=None) -> int:
    """Run the interactive vault menu on standard input."""
    signed_in = ""
    try:
        while True:
            for line in MENU:
                print(line)
            try:
                choice = int(input().strip())
            except ValueError:
                return 0

            if choice == 1:
                print("Creating a new vault")
                name = input(_ASK_NAME)
                password = input(_ASK_MASTER)
                confirmation = input(_ASK_CONFIRM)
                try:
                    create_vault(name, password, confirmation)
                except VaultError as err:
                    print(err)
                    continue
                print()
                print("Vault successfully created..")
                print()
            elif choice == 2:
                name = input(_ASK_VAULT)
                password = input(_ASK_VAULT_KEY)
                try:
                    signed_in = sign_in(name, password)
                except VaultError as err:
                    print(err)
                    return 1
                print("Signed into the vault successfully..!")
                print("Vault name obtained is ", signed_in)
            elif choice == 3:
                password = input(_ASK_NEW_ENTRY)
                try:
                    add_password(signed_in, password)
                except VaultError as err:
                    print(err)
                    continue
                print("Password updated successfully")
                print()
            elif choice == 4:
                try:
                    stored = fetch_password(signed_in)
                except VaultError as err:
                    print(err)
                    return 0
                print()
                print("Password obtained from ", signed_in + " is ", stored)
            else:
                return 0
    except EOFError:
        return 0