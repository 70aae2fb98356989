"""Unit tests for factory functions."""

from pathlib import Path

import httpx
import pytest

from mdn_lsp.adapters.fakes import FakePlatformDetector, FakeStatusReporter, FakeWorktree
from mdn_lsp.domain.settings import BootstrapConfig
from mdn_lsp.extension import MdnLspExtension
from mdn_lsp.factories import create_extension


@pytest.mark.unit
@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.CreateExtension")
class TestCreateExtension:
    """Test wiring of the production extension."""

    def test_returns_extension_with_empty_state(self, tmp_path: Path) -> None:
        extension = create_extension(
            BootstrapConfig(working_dir=tmp_path),
            platform_detector=FakePlatformDetector.from_tuple("linux", "x86_64"),
        )

        assert isinstance(extension, MdnLspExtension)
        assert extension.state.binary_path is None

    def test_detects_platform_once(self, tmp_path: Path) -> None:
        detector = FakePlatformDetector.from_tuple("mac", "aarch64")

        create_extension(BootstrapConfig(working_dir=tmp_path), platform_detector=detector)

        assert detector.detect_calls == 1

    def test_end_to_end_with_mock_transport(self, tmp_path: Path) -> None:
        """Test the wired extension downloads, installs and builds a command."""
        import io
        import tarfile

        buffer = io.BytesIO()
        with tarfile.open(fileobj=buffer, mode="w:gz") as archive:
            info = tarfile.TarInfo("rari")
            info.size = 2
            archive.addfile(info, io.BytesIO(b"#!"))
        asset = "rari-x86_64-unknown-linux-musl.tar.gz"
        download_url = f"https://github.com/mdn/rari/releases/download/v0.1.5/{asset}"
        requests: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(str(request.url))
            if request.url.path == "/repos/mdn/rari/releases":
                return httpx.Response(
                    200,
                    json=[
                        {
                            "tag_name": "v0.1.5",
                            "draft": False,
                            "prerelease": False,
                            "assets": [{"name": asset, "browser_download_url": download_url}],
                        }
                    ],
                )
            return httpx.Response(200, content=buffer.getvalue())

        work_dir = tmp_path / "work"
        (work_dir / "rari-v0.1.4").mkdir(parents=True)
        status = FakeStatusReporter()
        extension = create_extension(
            BootstrapConfig(working_dir=work_dir),
            platform_detector=FakePlatformDetector.from_tuple("linux", "x86_64"),
            status_reporter=status,
            client=httpx.Client(transport=httpx.MockTransport(handler)),
            github_token="",
        )
        project = tmp_path / "project"
        project.mkdir()

        command = extension.language_server_command(
            FakeWorktree(root=str(project), env=[("PATH", "/usr/bin")])
        )

        installed = work_dir / "rari-v0.1.5" / "rari"
        assert command.command == str(installed)
        assert command.args == ("lsp",)
        assert command.env == {"CONTENT_ROOT": f"{project}/files", "PATH": "/usr/bin"}
        assert installed.is_file()
        assert sorted(p.name for p in work_dir.iterdir()) == ["rari-v0.1.5"]
        assert requests[-1] == download_url
        assert extension.state.binary_path == str(installed)
