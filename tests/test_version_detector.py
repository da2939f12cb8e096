"""Tests for engine version detection under an engine root."""

from uplugin_builder.services.version_detector import VersionDetectorService


def make_dirs(root, *names):
    for name in names:
        (root / name).mkdir()


class TestVersionDetector:

    def test_returns_only_matching_directories_in_name_order(self, engine_root):
        make_dirs(engine_root, "UE_5.3", "UE_4.27", "UE_5.0", "Launcher", "DirectXRedist")
        (engine_root / "UE_5.4.txt").write_text("not a directory")
        (engine_root / "readme.md").write_text("")

        versions = list(VersionDetectorService().detect(engine_root))

        assert versions == ["UE_4.27", "UE_5.0", "UE_5.3"]

    def test_prefix_match_is_case_insensitive(self, engine_root):
        make_dirs(engine_root, "ue_5.1", "UE_5.2", "MyUE_5.3")

        assert list(VersionDetectorService().detect(engine_root)) == ["ue_5.1", "UE_5.2"]

    def test_nested_installations_are_ignored(self, engine_root):
        make_dirs(engine_root, "Engines")
        make_dirs(engine_root / "Engines", "UE_5.3")

        assert list(VersionDetectorService().detect(engine_root)) == []

    def test_missing_root_yields_nothing(self, tmp_path):
        assert list(VersionDetectorService().detect(tmp_path / "does-not-exist")) == []

    def test_root_that_is_a_file_yields_nothing(self, tmp_path):
        not_a_dir = tmp_path / "UE_5.3"
        not_a_dir.write_text("")

        assert list(VersionDetectorService().detect(not_a_dir)) == []

    def test_detection_is_lazy_and_restartable(self, engine_root):
        detector = VersionDetectorService()
        make_dirs(engine_root, "UE_5.0")

        pending = detector.detect(engine_root)
        make_dirs(engine_root, "UE_5.1")

        assert list(pending) == ["UE_5.0", "UE_5.1"]

        make_dirs(engine_root, "UE_5.2")
        assert list(detector.detect(engine_root)) == ["UE_5.0", "UE_5.1", "UE_5.2"]

    def test_custom_pattern(self, engine_root):
        make_dirs(engine_root, "UE_5.3", "Unreal-5.3")

        assert list(VersionDetectorService("Unreal-*").detect(engine_root)) == ["Unreal-5.3"]
