from unittest.mock import MagicMock

import pytest

from booking_desk.desk.config import DeskSettings
from booking_desk.desk.seed import seed_session
from booking_desk.desk.session import DeskSession, create_session


@pytest.fixture
def empty_session() -> DeskSession:
    """初期データなしのセッション（旅程・スケジュールのみ）"""
    return create_session(DeskSettings(seed=False))


@pytest.fixture
def session() -> DeskSession:
    """起動時と同じ初期データを投入したセッション"""
    desk_session = create_session(DeskSettings())
    seed_session(desk_session)
    return desk_session


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()
