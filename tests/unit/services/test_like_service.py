"""
Tests du LikeService avec un repository mocke.

Un like en double est refuse ; retirer un like absent est silencieux.
"""

from unittest.mock import MagicMock

import pytest

from filmorate.core.exceptions import DuplicateError
from filmorate.core.ports.repositories import ILikeRepository
from filmorate.services import LikeService


@pytest.fixture
def mock_like_repo() -> MagicMock:
    repo = MagicMock(spec=ILikeRepository)
    repo.exists.return_value = False
    return repo


@pytest.fixture
def like_service(mock_like_repo) -> LikeService:
    return LikeService(like_repo=mock_like_repo)


class TestAddLike:
    def test_premier_like_enregistre(self, like_service, mock_like_repo):
        like_service.add_like(1, 2)

        mock_like_repo.exists.assert_called_once_with(1, 2)
        mock_like_repo.add.assert_called_once_with(1, 2)

    def test_like_en_double_refuse(self, like_service, mock_like_repo):
        mock_like_repo.exists.return_value = True

        with pytest.raises(DuplicateError):
            like_service.add_like(1, 2)

        mock_like_repo.add.assert_not_called()


class TestRemoveLike:
    def test_retrait_d_un_like_existant(self, like_service, mock_like_repo):
        mock_like_repo.exists.return_value = True

        like_service.remove_like(1, 2)

        mock_like_repo.remove.assert_called_once_with(1, 2)

    def test_retrait_absent_silencieux(self, like_service, mock_like_repo):
        like_service.remove_like(1, 2)

        mock_like_repo.remove.assert_not_called()


class TestIsFilmLiked:
    @pytest.mark.parametrize("stored", [True, False])
    def test_delegue_au_repository(self, like_service, mock_like_repo, stored):
        mock_like_repo.exists.return_value = stored

        assert like_service.is_film_liked_by_user(3, 4) is stored
