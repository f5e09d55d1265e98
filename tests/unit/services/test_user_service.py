"""
Tests du UserService avec un repository mocke.

Couvre l'unicite email/login, le nom par defaut, la mise a jour partielle
et les regles d'amitie (soi-meme, doublon, retrait idempotent).
"""

from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from filmorate.core.entities import User, UserUpdate
from filmorate.core.exceptions import DuplicateError, NotFoundError
from filmorate.core.ports.repositories import IUserRepository
from filmorate.services import UserService


@pytest.fixture
def mock_user_repo() -> MagicMock:
    repo = MagicMock(spec=IUserRepository)
    repo.add.side_effect = lambda user: replace(user, id=1)
    repo.update.side_effect = lambda user: user
    repo.exists_by_id.return_value = True
    repo.exists_by_email.return_value = False
    repo.exists_by_login.return_value = False
    return repo


@pytest.fixture
def user_service(mock_user_repo) -> UserService:
    return UserService(user_repo=mock_user_repo)


class TestAddUser:
    def test_nom_vide_remplace_par_le_login(self, user_service, make_user):
        result = user_service.add_user(make_user(name="  "))
        assert result.name == "user1"

    def test_nom_absent_remplace_par_le_login(self, user_service, make_user):
        result = user_service.add_user(make_user(name=None))
        assert result.name == "user1"

    def test_email_deja_pris(self, user_service, mock_user_repo, make_user):
        mock_user_repo.exists_by_email.return_value = True

        with pytest.raises(DuplicateError, match="email"):
            user_service.add_user(make_user())

        mock_user_repo.exists_by_email.assert_called_once_with("user1@example.com", None)
        mock_user_repo.add.assert_not_called()

    def test_login_deja_pris(self, user_service, mock_user_repo, make_user):
        mock_user_repo.exists_by_login.return_value = True

        with pytest.raises(DuplicateError, match="login"):
            user_service.add_user(make_user())

        mock_user_repo.add.assert_not_called()


class TestUpdateUser:
    def test_unicite_controlee_hors_utilisateur_lui_meme(
        self, user_service, mock_user_repo, make_user
    ):
        user_service.update_user(make_user(id=3))

        mock_user_repo.exists_by_email.assert_called_once_with("user1@example.com", 3)
        mock_user_repo.exists_by_login.assert_called_once_with("user1", 3)

    def test_utilisateur_inconnu_sans_ecriture(self, user_service, mock_user_repo, make_user):
        mock_user_repo.exists_by_id.return_value = False

        with pytest.raises(NotFoundError):
            user_service.update_user(make_user(id=3))

        mock_user_repo.update.assert_not_called()


class TestPatchUser:
    def test_champs_fournis_appliques(self, user_service, mock_user_repo, make_user):
        mock_user_repo.find_by_id.return_value = make_user(id=2)

        result = user_service.patch_user(UserUpdate(id=2, login="neo", name=" "))

        assert result.login == "neo"
        assert result.name == "User 1"
        assert result.email == "user1@example.com"
        mock_user_repo.exists_by_login.assert_called_once_with("neo", 2)
        mock_user_repo.exists_by_email.assert_not_called()

    def test_email_deja_pris_par_un_autre(self, user_service, mock_user_repo, make_user):
        mock_user_repo.find_by_id.return_value = make_user(id=2)
        mock_user_repo.exists_by_email.return_value = True

        with pytest.raises(DuplicateError):
            user_service.patch_user(UserUpdate(id=2, email="pris@example.com"))

        mock_user_repo.update.assert_not_called()


class TestFriends:
    def test_ami_soi_meme_refuse_sans_mutation(self, user_service, mock_user_repo):
        with pytest.raises(DuplicateError):
            user_service.add_friend(4, 4)

        mock_user_repo.add_friend.assert_not_called()

    def test_ajout_d_ami(self, user_service, mock_user_repo):
        mock_user_repo.find_by_id.return_value = User(id=1, email="a@b.c", login="a")

        user_service.add_friend(1, 2)

        mock_user_repo.add_friend.assert_called_once_with(1, 2)

    def test_ami_en_double_refuse(self, user_service, mock_user_repo):
        mock_user_repo.find_by_id.return_value = User(id=1, email="a@b.c", login="a", friends={2})

        with pytest.raises(DuplicateError):
            user_service.add_friend(1, 2)

        mock_user_repo.add_friend.assert_not_called()

    def test_ami_inconnu(self, user_service, mock_user_repo):
        mock_user_repo.exists_by_id.side_effect = lambda user_id: user_id == 1

        with pytest.raises(NotFoundError):
            user_service.add_friend(1, 99)

    def test_retrait_d_un_ami_absent_sans_effet(self, user_service, mock_user_repo):
        mock_user_repo.find_by_id.return_value = User(id=1, email="a@b.c", login="a")

        user_service.remove_friend(1, 2)

        mock_user_repo.remove_friend.assert_not_called()

    def test_retrait_de_soi_meme_refuse(self, user_service):
        with pytest.raises(DuplicateError):
            user_service.remove_friend(3, 3)

    def test_amis_communs_utilisateur_inconnu(self, user_service, mock_user_repo):
        mock_user_repo.exists_by_id.side_effect = lambda user_id: user_id != 8

        with pytest.raises(NotFoundError):
            user_service.get_common_friends(1, 8)

        mock_user_repo.get_common_friends.assert_not_called()

