"""Unit tests for Flex UI compatibility validation."""

import pytest

from plugin_deploy.core.compatibility import verify_flex_ui_configuration
from plugin_deploy.core.exceptions import PreconditionFailedError, UserRejectedError

REACT_DEPENDENCIES = {"react": "^16.13.0", "react-dom": "^16.13.0"}


class FakeConfirm:
    """Records prompts and answers with a fixed value."""

    def __init__(self, answer: bool = False):
        self.answer = answer
        self.calls: list[tuple[str, bool]] = []

    async def __call__(self, message: str, default: bool) -> bool:
        self.calls.append((message, default))
        return self.answer


def installed(versions: dict[str, str]):
    return lambda package: versions.get(package)


class TestVerifyFlexUIConfiguration:
    """Tests for verify_flex_ui_configuration."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("ui_version", ["1.18.0", "1.20.0", "garbage", ""])
    async def test_disabled_never_prompts_or_fails(self, ui_version: str):
        """Test the check is a no-op without unbundled React."""
        confirm = FakeConfirm()

        await verify_flex_ui_configuration(
            ui_version,
            {},
            False,
            installed_version=installed({"react": "15.0.0"}),
            confirm=confirm,
        )

        assert confirm.calls == []

    @pytest.mark.asyncio
    async def test_old_flex_ui_fails_without_prompt(self):
        """Test UI versions below 1.19 are a hard failure."""
        confirm = FakeConfirm(answer=True)

        with pytest.raises(PreconditionFailedError) as exc_info:
            await verify_flex_ui_configuration(
                "1.18.0",
                REACT_DEPENDENCIES,
                True,
                installed_version=installed({"react": "16.13.1", "react-dom": "16.13.1"}),
                confirm=confirm,
            )

        assert "1.18.0" in exc_info.value.message
        assert "1.19 or above" in exc_info.value.message
        assert confirm.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("ui_version", ["1.19.0", "~1.19.0", "1.20.0", "v1.21", "2.0.0"])
    async def test_supported_flex_ui(self, ui_version: str):
        confirm = FakeConfirm()

        await verify_flex_ui_configuration(
            ui_version,
            REACT_DEPENDENCIES,
            True,
            installed_version=installed({"react": "16.13.1", "react-dom": "16.13.1"}),
            confirm=confirm,
        )

        assert confirm.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "dependencies",
        [{}, {"react": "^16.13.0"}, {"react-dom": "^16.13.0"}, {"react": "", "react-dom": "^16.13.0"}],
    )
    async def test_missing_dependencies(self, dependencies: dict[str, str]):
        """Test React versions must be configured on the account."""
        with pytest.raises(PreconditionFailedError, match="set the React version"):
            await verify_flex_ui_configuration(
                "1.20.0",
                dependencies,
                True,
                installed_version=installed({"react": "16.13.1", "react-dom": "16.13.1"}),
                confirm=FakeConfirm(),
            )

    @pytest.mark.asyncio
    async def test_react_mismatch_rejected(self):
        """Test declining the confirmation aborts the deploy."""
        confirm = FakeConfirm(answer=False)

        with pytest.raises(UserRejectedError):
            await verify_flex_ui_configuration(
                "1.20.0",
                REACT_DEPENDENCIES,
                True,
                installed_version=installed({"react": "17.0.2", "react-dom": "16.13.1"}),
                confirm=confirm,
            )

        assert confirm.calls == [("Do you still want to continue deploying?", False)]

    @pytest.mark.asyncio
    async def test_react_dom_mismatch_accepted(self):
        """Test accepting the confirmation continues the deploy."""
        confirm = FakeConfirm(answer=True)

        await verify_flex_ui_configuration(
            "1.20.0",
            REACT_DEPENDENCIES,
            True,
            installed_version=installed({"react": "16.13.1", "react-dom": "17.0.2"}),
            confirm=confirm,
        )

        assert len(confirm.calls) == 1

    @pytest.mark.asyncio
    async def test_react_not_installed_prompts(self):
        confirm = FakeConfirm(answer=False)

        with pytest.raises(UserRejectedError):
            await verify_flex_ui_configuration(
                "1.20.0",
                REACT_DEPENDENCIES,
                True,
                installed_version=installed({}),
                confirm=confirm,
            )
