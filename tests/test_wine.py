import pytest

from bottles_core import BottlesIOError, NotFoundError
from bottles_core.runners import PrefixArch, Wine, WindowsVersion


def test_discovery(make_wine):
    base = make_wine("wine-9.0", version="wine-9.0\n")

    wine = Wine(base)

    assert wine.info.name == base.name
    assert wine.info.version.startswith("wine-9.0")
    assert wine.info.executable_path == base / "bin" / "wine"
    assert wine.wine is wine


def test_discovery_rejects_missing_directory(tmp_path):
    with pytest.raises(NotFoundError):
        Wine(tmp_path / "missing")


def test_discovery_rejects_directory_without_wine(tmp_path):
    (tmp_path / "empty").mkdir()

    with pytest.raises(NotFoundError):
        Wine(tmp_path / "empty")


def test_availability_follows_executable(make_wine):
    wine = Wine(make_wine())
    assert wine.is_available()

    wine.info.executable_path.unlink()
    assert not wine.is_available()


def test_initialize(make_wine, recorder, prefix):
    wine = Wine(make_wine())

    wine.initialize(prefix)

    calls = recorder(wine.info.executable_path)
    assert calls.args() == ["wineboot", "--init"]
    assert calls.env()["WINEPREFIX"] == str(prefix)


def test_initialize_with_arch(make_wine, recorder, prefix):
    wine = Wine(make_wine())

    wine.initialize(prefix, arch=PrefixArch.WIN32)

    assert recorder(wine.info.executable_path).env()["WINEARCH"] == "win32"


def test_initialize_failure_is_io_error(make_wine, prefix):
    wine = Wine(make_wine(status=3))

    with pytest.raises(BottlesIOError, match="status 3"):
        wine.initialize(prefix)


def test_set_windows_version(make_wine, recorder, prefix):
    wine = Wine(make_wine())

    wine.set_windows_version(prefix, WindowsVersion.WIN7)

    calls = recorder(wine.info.executable_path)
    assert calls.args() == ["winecfg", "-v", "win7"]
    assert calls.env()["WINEPREFIX"] == str(prefix)


def test_launch(make_wine, recorder, prefix):
    wine = Wine(make_wine())

    child = wine.launch("C:\\Games\\game.exe", ["-windowed", "--fps 60"], prefix, {"DXVK_HUD": "1"})

    assert child.wait() == 0
    calls = recorder(wine.info.executable_path)
    assert calls.args() == ["C:\\Games\\game.exe", "-windowed", "--fps 60"]
    assert calls.env()["WINEPREFIX"] == str(prefix)
    assert calls.env()["DXVK_HUD"] == "1"


def test_launch_returns_live_child(make_wine, prefix):
    wine = Wine(make_wine(status=7))

    child = wine.launch("game.exe", [], prefix)

    assert child.wait() == 7


def test_launch_caller_env_overrides(make_wine, recorder, prefix, tmp_path):
    wine = Wine(make_wine())
    other = str(tmp_path / "other")

    wine.launch("game.exe", [], prefix, {"WINEPREFIX": other}).wait()

    assert recorder(wine.info.executable_path).env()["WINEPREFIX"] == other


def test_launch_inherits_process_environment(make_wine, recorder, prefix, monkeypatch):
    monkeypatch.setenv("BOTTLES_TEST_INHERITED", "yes")
    wine = Wine(make_wine())

    wine.launch("game.exe", [], prefix).wait()

    assert recorder(wine.info.executable_path).env()["BOTTLES_TEST_INHERITED"] == "yes"


def test_launch_missing_executable_is_io_error(make_wine, prefix):
    wine = Wine(make_wine())
    wine.info.executable_path.unlink()

    with pytest.raises(BottlesIOError):
        wine.launch("game.exe", [], prefix)
