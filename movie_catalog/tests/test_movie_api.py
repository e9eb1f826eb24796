from http import HTTPStatus

import pytest
from fastapi import status

from .conftest import BaseIntegrationTest
from .factories import movie_factory


class TestMovieAPI(BaseIntegrationTest):
    """Integration tests for Movie API endpoints"""

    async def _create(self, client, **overrides):
        response = await client.post("/movies/", json=movie_factory.create_movie_data(**overrides))
        assert response.status_code == status.HTTP_201_CREATED
        return response.json()

    async def _seed_fixture_set(self, client):
        await self._create(client, title="A", genre="Drama", year=1995)
        await self._create(client, title="B", genre="Drama", year=1980)
        await self._create(client, title="C", genre="Comedy", year=1995)

    @pytest.mark.asyncio
    async def test_root(self, client):
        response = await client.get("/")

        assert response.status_code == status.HTTP_200_OK

    @pytest.mark.asyncio
    async def test_create_movie_success(self, client):
        response = await client.post("/movies/", json=movie_factory.create_movie_data())

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["id"] > 0
        assert data["title"] == "The Test Movie"
        assert data["genre"] == "Drama"

    @pytest.mark.asyncio
    async def test_create_movie_title_too_long(self, client):
        response = await client.post("/movies/", json=movie_factory.create_movie_data(title="x" * 101))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "100 characters" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_create_movie_invalid_genre(self, client):
        response = await client.post("/movies/", json=movie_factory.create_movie_data(genre="Western"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_create_movie_missing_field(self, client):
        data = movie_factory.create_movie_data()
        del data["director"]

        response = await client.post("/movies/", json=data)

        assert response.status_code == HTTPStatus.UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio
    async def test_create_duplicate_leaves_store_unchanged(self, client):
        await self._create(client)
        before = (await client.get("/movies/")).json()

        response = await client.post("/movies/", json=movie_factory.create_movie_data(director="Other"))

        assert response.status_code == status.HTTP_409_CONFLICT
        assert (await client.get("/movies/")).json() == before

    @pytest.mark.asyncio
    async def test_read_movie(self, client):
        created = await self._create(client)

        response = await client.get(f"/movies/{created['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == created

    @pytest.mark.asyncio
    async def test_read_movie_not_found(self, client):
        response = await client.get("/movies/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_read_movie_invalid_id(self, client):
        response = await client.get("/movies/0")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_list_without_filters_matches_all(self, client):
        await self._seed_fixture_set(client)

        first = await client.get("/movies/")
        second = await client.get("/movies/")

        assert first.status_code == status.HTTP_200_OK
        assert [movie["title"] for movie in first.json()["movies"]] == ["A", "B", "C"]
        assert first.json() == second.json()

    @pytest.mark.asyncio
    async def test_list_with_genre_and_range(self, client):
        await self._seed_fixture_set(client)

        response = await client.get("/movies/", params={"genre": "Drama", "year_from": 1990, "year_to": 2000})

        assert response.status_code == status.HTTP_200_OK
        assert [movie["title"] for movie in response.json()["movies"]] == ["A"]

    @pytest.mark.asyncio
    async def test_list_with_inverted_range(self, client):
        response = await client.get("/movies/", params={"year_from": 2000, "year_to": 1990})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_list_with_single_bound_returns_all(self, client):
        await self._seed_fixture_set(client)

        response = await client.get("/movies/", params={"genre": "Comedy", "year_from": 1990})

        assert len(response.json()["movies"]) == 3

    @pytest.mark.asyncio
    async def test_search_by_title(self, client):
        await self._create(client, title="The Matrix", year=1999)
        await self._create(client, title="Heat", year=1995)

        response = await client.get("/movies/search", params={"title": "matrix"})

        assert response.status_code == status.HTTP_200_OK
        assert [movie["title"] for movie in response.json()["movies"]] == ["The Matrix"]

    @pytest.mark.asyncio
    async def test_search_blank_title(self, client):
        response = await client.get("/movies/search", params={"title": "  "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_read_by_genre(self, client):
        await self._seed_fixture_set(client)

        response = await client.get("/movies/genre/drama")
        ranged = await client.get("/movies/genre/Drama", params={"year_from": 1990, "year_to": 2000})
        partial = await client.get("/movies/genre/Drama", params={"year_from": 1990})

        assert [movie["title"] for movie in response.json()["movies"]] == ["A", "B"]
        assert [movie["title"] for movie in ranged.json()["movies"]] == ["A"]
        assert partial.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_read_by_year_range(self, client):
        await self._seed_fixture_set(client)

        response = await client.get("/movies/years", params={"year_from": 1990, "year_to": 2000})
        too_old = await client.get("/movies/years", params={"year_from": 1850, "year_to": 2000})

        assert [movie["title"] for movie in response.json()["movies"]] == ["A", "C"]
        assert too_old.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_read_genres(self, client):
        response = await client.get("/movies/genres")

        assert response.status_code == status.HTTP_200_OK
        assert "Drama" in response.json()["genres"]

    @pytest.mark.asyncio
    async def test_update_movie(self, client):
        created = await self._create(client)
        payload = movie_factory.create_movie_data(title="Updated", duration_minutes=95, genre="Comedy")

        response = await client.put(f"/movies/{created['id']}", json=payload)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"id": created["id"], **payload}

    @pytest.mark.asyncio
    async def test_update_movie_not_found(self, client):
        response = await client.put("/movies/999", json=movie_factory.create_movie_data())

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_update_into_duplicate(self, client):
        await self._create(client, title="Taken")
        other = await self._create(client, title="Free")

        response = await client.put(f"/movies/{other['id']}", json=movie_factory.create_movie_data(title="Taken"))

        assert response.status_code == status.HTTP_409_CONFLICT

    @pytest.mark.asyncio
    async def test_delete_movie(self, client):
        created = await self._create(client)

        response = await client.delete(f"/movies/{created['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Movie 'The Test Movie' deleted successfully"}
        assert (await client.get(f"/movies/{created['id']}")).status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_missing_movie_leaves_store_unchanged(self, client):
        await self._create(client)

        response = await client.delete("/movies/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert len((await client.get("/movies/")).json()["movies"]) == 1

    @pytest.mark.asyncio
    async def test_huge_id_is_not_found(self, client):
        huge_id = 99999999999999999999

        read = await client.get(f"/movies/{huge_id}")
        update = await client.put(f"/movies/{huge_id}", json=movie_factory.create_movie_data())
        delete = await client.delete(f"/movies/{huge_id}")

        assert read.status_code == status.HTTP_404_NOT_FOUND
        assert update.status_code == status.HTTP_404_NOT_FOUND
        assert delete.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_huge_year_bounds_are_rejected(self, client):
        await self._create(client)
        huge = 10**20

        listed = await client.get("/movies/", params={"year_from": 1, "year_to": huge})
        one_sided = await client.get("/movies/", params={"genre": "Drama", "year_from": huge})
        ranged = await client.get("/movies/years", params={"year_from": 1990, "year_to": huge})
        by_genre = await client.get("/movies/genre/Drama", params={"year_from": -huge, "year_to": 2000})

        assert listed.status_code == status.HTTP_400_BAD_REQUEST
        assert one_sided.status_code == status.HTTP_400_BAD_REQUEST
        assert ranged.status_code == status.HTTP_400_BAD_REQUEST
        assert by_genre.status_code == status.HTTP_400_BAD_REQUEST
