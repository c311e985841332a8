"""
============================================================
File: errors.py
Author: Internal Systems Automation Team
Created: 2026-10-19

Description:
Gerarchia delle eccezioni del launcher. Ogni tipo di errore
porta con sé un exit code distinto, scelto dal dispatcher
quando presenta il messaggio all'utente.
============================================================
"""


class CmdError(Exception):
    exit_code = 1


class UsageError(CmdError):
    exit_code = 2


# --- Scope locator ---

class ScopeError(CmdError):
    pass


class NoLocalScope(ScopeError):
    exit_code = 10

    def __init__(self, cwd):
        self.cwd = cwd
        super().__init__(f"no local scope found from {cwd} (run 'cmd --init' first)")


class GlobalScopeMissing(ScopeError):
    exit_code = 11

    def __init__(self, path):
        self.path = path
        super().__init__(f"global scope is not initialized at {path} (run 'cmd --init --global')")


class AlreadyInitialized(ScopeError):
    exit_code = 12

    def __init__(self, path):
        self.path = path
        super().__init__(f"{path} is already initialized")


class MarkerNotDirectory(ScopeError):
    exit_code = 13

    def __init__(self, path):
        self.path = path
        super().__init__(f"{path} exists and is not a directory")


# --- Script registry ---

class RegistryError(CmdError):
    pass


class DuplicateName(RegistryError):
    exit_code = 20

    def __init__(self, name):
        self.name = name
        super().__init__(f"unable to create '{name}' because it already exists")


class NotFound(RegistryError):
    exit_code = 21

    def __init__(self, name):
        self.name = name
        super().__init__(f"'{name}' is an unknown command")


class InvalidName(RegistryError):
    exit_code = 22

    def __init__(self, name, reason):
        self.name = name
        self.reason = reason
        super().__init__(f"invalid script name '{name}': {reason}")


# --- Index store ---

class IndexStoreError(CmdError):
    pass


class CorruptIndex(IndexStoreError):
    exit_code = 30

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"corrupt index {path}: {reason}")


class WriteFailure(IndexStoreError):
    exit_code = 31

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__(f"unable to save the index file {path}: {cause}")


# --- Dispatcher ---

class ScriptFileMissing(CmdError):
    exit_code = 40

    def __init__(self, name, path):
        self.name = name
        self.path = path
        super().__init__(f"the '{name}' alias points to a non-existent file {path}")


class LaunchError(CmdError):
    exit_code = 41

    def __init__(self, program, cause):
        self.program = program
        self.cause = cause
        super().__init__(f"failed to execute {program}: {cause}")
