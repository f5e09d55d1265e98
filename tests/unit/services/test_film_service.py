"""
Tests du FilmService avec repositories et services mockes.

Couvre :
- resolution MPA et genres (dedoublonnage, tri, references inconnues)
- remplacement complet et mise a jour partielle
- likes : existence du film puis de l'utilisateur
- classement des films populaires
"""

from dataclasses import replace
from datetime import date
from unittest.mock import MagicMock

import pytest

from filmorate.core.entities import FilmUpdate, Genre, Mpa
from filmorate.core.exceptions import DuplicateError, NotFoundError, ValidationError
from filmorate.core.ports.repositories import IFilmRepository
from filmorate.services import FilmService, GenreService, LikeService, MpaService, UserService

GENRE_NAMES = {1: "Comedy", 2: "Drama", 4: "Thriller"}


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_film_repo() -> MagicMock:
    repo = MagicMock(spec=IFilmRepository)
    repo.add.side_effect = lambda film: replace(film, id=1)
    repo.update.side_effect = lambda film: film
    repo.exists_by_id.return_value = True
    return repo


@pytest.fixture
def mock_mpa_service() -> MagicMock:
    service = MagicMock(spec=MpaService)
    service.find_mpa_by_id.side_effect = lambda mpa_id: Mpa(id=mpa_id, name="R")
    return service


@pytest.fixture
def mock_genre_service() -> MagicMock:
    def find(genre_id):
        if genre_id not in GENRE_NAMES:
            raise NotFoundError(f"Genre avec l'ID {genre_id} introuvable")
        return Genre(id=genre_id, name=GENRE_NAMES[genre_id])

    service = MagicMock(spec=GenreService)
    service.find_genre_by_id.side_effect = find
    return service


@pytest.fixture
def mock_user_service() -> MagicMock:
    return MagicMock(spec=UserService)


@pytest.fixture
def mock_like_service() -> MagicMock:
    return MagicMock(spec=LikeService)


@pytest.fixture
def film_service(
    mock_film_repo, mock_user_service, mock_mpa_service, mock_genre_service, mock_like_service
) -> FilmService:
    return FilmService(
        film_repo=mock_film_repo,
        user_service=mock_user_service,
        mpa_service=mock_mpa_service,
        genre_service=mock_genre_service,
        like_service=mock_like_service,
    )


# ============================================================================
# Tests
# ============================================================================


class TestAddFilm:
    def test_resout_mpa_et_genres(self, film_service, mock_film_repo, make_film):
        film = make_film(mpa=Mpa(id=4), genres=[Genre(id=4), Genre(id=1), Genre(id=4)])

        result = film_service.add_film(film)

        assert result.id == 1
        assert result.mpa == Mpa(id=4, name="R")
        assert result.genres == [Genre(id=1, name="Comedy"), Genre(id=4, name="Thriller")]
        saved = mock_film_repo.add.call_args.args[0]
        assert [g.id for g in saved.genres] == [1, 4]

    def test_genre_inconnu_refuse(self, film_service, mock_film_repo, make_film):
        with pytest.raises(NotFoundError):
            film_service.add_film(make_film(genres=[Genre(id=99)]))

        mock_film_repo.add.assert_not_called()

    def test_mpa_inconnue_refusee(self, film_service, mock_mpa_service, mock_film_repo, make_film):
        mock_mpa_service.find_mpa_by_id.side_effect = NotFoundError("MPA introuvable")

        with pytest.raises(NotFoundError):
            film_service.add_film(make_film(mpa=Mpa(id=42)))

        mock_film_repo.add.assert_not_called()

    def test_mpa_absente_refusee(self, film_service, make_film):
        with pytest.raises(ValidationError):
            film_service.add_film(make_film(mpa=None))


class TestUpdateFilm:
    def test_film_inconnu_refuse_sans_ecriture(self, film_service, mock_film_repo, make_film):
        mock_film_repo.exists_by_id.return_value = False

        with pytest.raises(NotFoundError):
            film_service.update_film(make_film(id=7))

        mock_film_repo.update.assert_not_called()

    def test_liste_de_genres_vide_efface_les_genres(self, film_service, mock_film_repo, make_film):
        result = film_service.update_film(make_film(id=1, genres=[]))

        assert result.genres == []
        assert mock_film_repo.update.call_args.args[0].genres == []

    def test_genres_absents_equivalent_a_aucun_genre(self, film_service, make_film):
        result = film_service.update_film(make_film(id=1, genres=None))
        assert result.genres == []


class TestPatchFilm:
    def test_seuls_les_champs_fournis_sont_appliques(self, film_service, mock_film_repo, make_film):
        stored = make_film(id=1, mpa=Mpa(id=4, name="R"), genres=[Genre(id=2, name="Drama")])
        mock_film_repo.find_by_id.return_value = stored

        result = film_service.patch_film(FilmUpdate(id=1, duration=130))

        assert result.duration == 130
        assert result.name == "Alien"
        assert result.release_date == date(1979, 5, 25)
        assert result.genres == [Genre(id=2, name="Drama")]
        mock_film_repo.update.assert_called_once()

    def test_film_inconnu(self, film_service, mock_film_repo):
        mock_film_repo.find_by_id.return_value = None

        with pytest.raises(NotFoundError):
            film_service.patch_film(FilmUpdate(id=5, name="X"))

        mock_film_repo.update.assert_not_called()


class TestLikes:
    def test_like_delegue_apres_controles(
        self, film_service, mock_user_service, mock_like_service
    ):
        film_service.add_like(1, 2)

        mock_user_service.validate_user_exists.assert_called_once_with(2)
        mock_like_service.add_like.assert_called_once_with(1, 2)

    def test_like_film_inconnu(self, film_service, mock_film_repo, mock_like_service):
        mock_film_repo.exists_by_id.return_value = False

        with pytest.raises(NotFoundError):
            film_service.add_like(1, 2)

        mock_like_service.add_like.assert_not_called()

    def test_like_utilisateur_inconnu(self, film_service, mock_user_service, mock_like_service):
        mock_user_service.validate_user_exists.side_effect = NotFoundError("introuvable")

        with pytest.raises(NotFoundError):
            film_service.add_like(1, 99)

        mock_like_service.add_like.assert_not_called()

    def test_like_en_double_propage(self, film_service, mock_like_service):
        mock_like_service.add_like.side_effect = DuplicateError("deja like")

        with pytest.raises(DuplicateError):
            film_service.add_like(1, 2)

    def test_retrait_de_like(self, film_service, mock_like_service):
        film_service.remove_like(1, 2)
        mock_like_service.remove_like.assert_called_once_with(1, 2)


class TestPopularFilms:
    def test_delegue_au_repository(self, film_service, mock_film_repo):
        mock_film_repo.get_popular.return_value = []

        assert film_service.get_popular_films(3) == []
        mock_film_repo.get_popular.assert_called_once_with(3)

    @pytest.mark.parametrize("count", [0, -1])
    def test_nombre_non_positif_refuse(self, film_service, mock_film_repo, count):
        with pytest.raises(ValidationError):
            film_service.get_popular_films(count)

        mock_film_repo.get_popular.assert_not_called()

    def test_nombre_obligatoire(self, film_service):
        """Le nombre par defaut releve des Settings, pas du service."""
        with pytest.raises(TypeError):
            film_service.get_popular_films()


class TestFindFilm:
    def test_film_introuvable(self, film_service, mock_film_repo):
        mock_film_repo.find_by_id.return_value = None

        with pytest.raises(NotFoundError):
            film_service.find_film_by_id(404)
