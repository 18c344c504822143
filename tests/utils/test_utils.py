"""Tests for the generic project helpers."""

from pathlib import Path

from cost_ledger.utils import utils as utils_module


def test_project_root_is_the_checkout(monkeypatch) -> None:
    monkeypatch.delenv("COST_LEDGER_HOME", raising=False)

    root = utils_module.get_project_root()

    assert (root / "pyproject.toml").is_file()
    assert (root / "cost_ledger").is_dir()


def test_home_variable_overrides_root(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("COST_LEDGER_HOME", str(tmp_path))

    assert utils_module.get_project_root() == tmp_path.resolve()


def test_installed_package_uses_working_directory(monkeypatch, tmp_path: Path) -> None:
    """Without a checkout around the package, paths follow the cwd."""
    site_packages = tmp_path / "site-packages"
    module_file = site_packages / "cost_ledger" / "utils" / "utils.py"
    module_file.parent.mkdir(parents=True)
    module_file.touch()
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.delenv("COST_LEDGER_HOME", raising=False)
    monkeypatch.setattr(utils_module, "__file__", str(module_file))
    monkeypatch.chdir(workdir)

    assert utils_module.get_project_root() == workdir.resolve()
