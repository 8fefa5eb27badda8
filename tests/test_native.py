from pathlib import Path

from depwalker.manifest import PackageManifest
from depwalker.native import NativeModuleType, detect_native_module_type


def _manifest(**deps: str) -> PackageManifest:
    return PackageManifest.model_validate({"name": "pkg", "dependencies": deps})


def test_prebuild_helper_dependency(tmp_path: Path) -> None:
    manifest = PackageManifest.model_validate(
        {"name": "pkg", "dependencies": {"prebuild-install": "^7.0.0"}}
    )
    assert detect_native_module_type(manifest, tmp_path) is NativeModuleType.PREBUILD


def test_prebuild_wins_over_binding_gyp(tmp_path: Path) -> None:
    (tmp_path / "binding.gyp").write_text("{}", encoding="utf-8")
    manifest = PackageManifest.model_validate(
        {"name": "pkg", "dependencies": {"prebuild-install": "*"}}
    )
    assert detect_native_module_type(manifest, tmp_path) is NativeModuleType.PREBUILD


def test_binding_gyp(tmp_path: Path) -> None:
    (tmp_path / "binding.gyp").write_text("{}", encoding="utf-8")
    assert detect_native_module_type(_manifest(), tmp_path) is NativeModuleType.NODE_GYP


def test_plain_javascript(tmp_path: Path) -> None:
    assert detect_native_module_type(_manifest(lodash="*"), tmp_path) is NativeModuleType.NONE


def test_dev_dependency_on_helper_is_ignored(tmp_path: Path) -> None:
    manifest = PackageManifest.model_validate(
        {"name": "pkg", "devDependencies": {"prebuild-install": "*"}}
    )
    assert detect_native_module_type(manifest, tmp_path) is NativeModuleType.NONE


def test_custom_helpers_and_descriptor(tmp_path: Path) -> None:
    (tmp_path / "CMakeLists.txt").write_text("", encoding="utf-8")
    assert (
        detect_native_module_type(
            _manifest(**{"node-gyp-build": "*"}),
            tmp_path,
            prebuild_helpers=["node-gyp-build"],
        )
        is NativeModuleType.PREBUILD
    )
    assert (
        detect_native_module_type(
            _manifest(), tmp_path, build_descriptor="CMakeLists.txt"
        )
        is NativeModuleType.NODE_GYP
    )
