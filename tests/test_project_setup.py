"""Project layout and packaging tests."""

from pathlib import Path
from click.testing import CliRunner


# Set up project root for tests
PROJECT_ROOT = Path(__file__).parent.parent
PACKAGE_ROOT = PROJECT_ROOT / "src" / "rich_progress_bar"


def test_package_structure_exists():
    """Verify all required directories exist"""
    assert PACKAGE_ROOT.exists()
    assert (PACKAGE_ROOT / "core").exists()
    assert (PACKAGE_ROOT / "ui").exists()
    assert (PACKAGE_ROOT / "utils").exists()
    assert (PROJECT_ROOT / "tests").exists()


def test_init_files_present():
    """All packages have __init__.py"""
    assert (PACKAGE_ROOT / "__init__.py").exists()
    assert (PACKAGE_ROOT / "core" / "__init__.py").exists()
    assert (PACKAGE_ROOT / "ui" / "__init__.py").exists()
    assert (PACKAGE_ROOT / "utils" / "__init__.py").exists()


def test_setup_py_valid():
    """setup.py contains required metadata"""
    setup_content = (PROJECT_ROOT / "setup.py").read_text()
    assert "name=" in setup_content
    assert "version=" in setup_content
    assert "packages=" in setup_content
    assert "entry_points=" in setup_content


def test_entry_point_configured():
    """CLI entry point is properly configured"""
    setup_content = (PROJECT_ROOT / "setup.py").read_text()
    assert "rich-progress-bar" in setup_content
    assert "rich_progress_bar.cli:main" in setup_content


def test_dependencies_declared():
    """Runtime and test dependencies are listed"""
    setup_content = (PROJECT_ROOT / "setup.py").read_text().lower()
    for req in ["click", "rich", "pytest", "pytest-mock"]:
        assert req in setup_content


def test_readme_has_usage():
    """README shows installation and usage"""
    content = (PROJECT_ROOT / "README.md").read_text().lower()
    assert "pip" in content
    assert "progressbar" in content


def test_public_api_exported():
    """Top-level package exports the public API"""
    import rich_progress_bar
    assert hasattr(rich_progress_bar, "__version__")
    assert hasattr(rich_progress_bar, "ProgressBar")
    assert hasattr(rich_progress_bar, "Colors")
    assert hasattr(rich_progress_bar, "DisplayMode")
    assert hasattr(rich_progress_bar, "OutputWriteError")


def test_version_defined():
    """Version follows semantic versioning"""
    from rich_progress_bar import __version__
    assert isinstance(__version__, str)
    assert "." in __version__


def test_test_directory_structure():
    """Tests mirror the package layout"""
    assert (PROJECT_ROOT / "tests" / "core").exists()
    assert (PROJECT_ROOT / "tests" / "ui").exists()
    assert (PROJECT_ROOT / "tests" / "utils").exists()


def test_cli_commands_available():
    """All commands respond to --help"""
    from rich_progress_bar.cli import main
    runner = CliRunner()

    for command in ["demo", "colors"]:
        result = runner.invoke(main, [command, "--help"])
        assert result.exit_code == 0
