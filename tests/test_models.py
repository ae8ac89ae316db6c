"""Tests for data models."""

from dataclasses import FrozenInstanceError

import pytest

from betterpick.models import (
    GetLeaguesResponseBody,
    GetNationalitiesBody,
    GetPlayersResponseBody,
    GetSearchResponseBody,
    League,
    Nationality,
    Player,
    PlayerFilterData,
    PlayerPreview,
    Position,
    PreferredFoot,
    SortOrder,
    TeamPreview,
)

from conftest import make_player_json


class TestTeamPreview:
    """Tests for TeamPreview model."""

    def test_from_dict(self) -> None:
        """Test decoding the API's JSON keys."""
        team = TeamPreview.from_dict(
            {"teamId": "243", "name": "Real Madrid", "logoURL": "https://img.test/243.png"}
        )
        assert team.team_id == "243"
        assert team.name == "Real Madrid"
        assert team.logo_url == "https://img.test/243.png"

    def test_numeric_id_becomes_string(self) -> None:
        """Test that numeric ids are normalized to strings."""
        team = TeamPreview.from_dict({"teamId": 10, "name": "Man City", "logoURL": "x"})
        assert team.team_id == "10"

    def test_is_immutable(self) -> None:
        """Test that a decoded preview cannot be modified."""
        team = TeamPreview(team_id="1", name="Ajax", logo_url="x")
        with pytest.raises(FrozenInstanceError):
            team.name = "PSV"  # type: ignore[misc]

    def test_missing_key_raises(self) -> None:
        """Test that a missing field fails decoding."""
        with pytest.raises(KeyError):
            TeamPreview.from_dict({"teamId": "1", "name": "Ajax"})

    def test_wrong_type_raises(self) -> None:
        """Test that a non-string name fails decoding."""
        with pytest.raises(TypeError):
            TeamPreview.from_dict({"teamId": "1", "name": 5, "logoURL": "x"})


class TestLeague:
    """Tests for League model."""

    def test_from_dict_with_clubs(self) -> None:
        """Test that clubs are decoded into previews."""
        league = League.from_dict(
            {
                "leagueId": "13",
                "name": "Premier League",
                "logoURL": "https://img.test/13.png",
                "clubs": [{"teamId": "1", "name": "Arsenal", "logoURL": "x"}],
            }
        )
        assert league.league_id == "13"
        assert league.clubs == [TeamPreview(team_id="1", name="Arsenal", logo_url="x")]

    def test_clubs_default_to_empty(self) -> None:
        """Test that a league without clubs decodes."""
        league = League.from_dict({"leagueId": "1", "name": "Liga", "logoURL": "x"})
        assert league.clubs == []


class TestPlayerPreview:
    """Tests for PlayerPreview model."""

    def test_from_dict(self) -> None:
        """Test basic decoding."""
        player = PlayerPreview.from_dict(
            make_player_json(
                "158023",
                name="L. Messi",
                overall=93,
                positions=["RW", "CF"],
                nationality="Argentina",
                club={"teamId": "73", "name": "Paris SG", "logoURL": "x"},
                photoURL="https://img.test/158023.png",
            )
        )
        assert player.id == "158023"
        assert player.name == "L. Messi"
        assert player.overall == 93
        assert player.positions == [Position.RW, Position.CF]
        assert player.primary_position == Position.RW
        assert player.nationality == "Argentina"
        assert player.club is not None
        assert player.club.name == "Paris SG"
        assert player.photo_url == "https://img.test/158023.png"

    def test_optional_fields(self) -> None:
        """Test that club and photo are optional."""
        player = PlayerPreview.from_dict({"id": "1", "name": "A", "overall": 50})
        assert player.club is None
        assert player.photo_url is None
        assert player.positions == []
        assert player.primary_position is None

    def test_overall_out_of_range_raises(self) -> None:
        """Test that ratings outside 1-99 are rejected."""
        with pytest.raises(ValueError):
            PlayerPreview.from_dict(make_player_json("1", overall=120))

    def test_unknown_position_raises(self) -> None:
        """Test that an unknown position code is rejected."""
        with pytest.raises(ValueError):
            PlayerPreview.from_dict(make_player_json("1", positions=["QB"]))


class TestPlayer:
    """Tests for the full Player model."""

    def test_from_dict_full(self) -> None:
        """Test decoding full player detail."""
        player = Player.from_dict(
            make_player_json(
                "20801",
                name="Cristiano Ronaldo",
                overall=91,
                fullName="Cristiano Ronaldo dos Santos Aveiro",
                age=35,
                height=187,
                weight=83,
                preferredFoot="Right",
                potential=91,
                value=58500000,
                wage=405000,
                attributes={"finishing": 95, "pace": 89},
            )
        )
        assert player.full_name == "Cristiano Ronaldo dos Santos Aveiro"
        assert player.age == 35
        assert player.height_cm == 187
        assert player.weight_kg == 83
        assert player.preferred_foot == PreferredFoot.RIGHT
        assert player.potential == 91
        assert player.value_eur == 58500000
        assert player.attributes == {"finishing": 95, "pace": 89}
        assert isinstance(player, PlayerPreview)

    def test_minimal_detail(self) -> None:
        """Test that every detail field is optional."""
        player = Player.from_dict(make_player_json("1"))
        assert player.age is None
        assert player.preferred_foot is None
        assert player.attributes == {}

    def test_non_string_preferred_foot_raises(self) -> None:
        """Test that a numeric foot is a type error."""
        with pytest.raises(TypeError, match="preferredFoot"):
            Player.from_dict(make_player_json("1", preferredFoot=1))

    def test_null_attributes_raises(self) -> None:
        """Test that attributes must be an object when present."""
        with pytest.raises(TypeError, match="attributes"):
            Player.from_dict(make_player_json("1", attributes=None))

    def test_potential_below_overall_raises(self) -> None:
        """Test that potential cannot be lower than overall."""
        with pytest.raises(ValueError, match="potential"):
            Player.from_dict(make_player_json("1", overall=80, potential=70))


class TestPlayerFilterData:
    """Tests for PlayerFilterData."""

    def test_default(self) -> None:
        """Test default criteria."""
        data = PlayerFilterData.default()
        assert data.nationality is None
        assert data.position is None
        assert data.min_overall == 40
        assert data.max_overall == 99
        assert data.sort_order == SortOrder.OVERALL_DESCENDING
        assert data.is_default is True

    def test_default_parameters(self) -> None:
        """Test that unset criteria are omitted from the query."""
        params = PlayerFilterData.default().parameters
        assert list(params.items()) == [
            ("minOverall", "40"),
            ("maxOverall", "99"),
            ("sort", "desc"),
        ]

    def test_full_parameters_in_order(self) -> None:
        """Test parameter names, values and order with every criterion set."""
        data = PlayerFilterData(
            nationality=Nationality(name="Côte d'Ivoire"),
            position=Position.CAM,
            min_overall=70,
            max_overall=85,
            sort_order=SortOrder.OVERALL_ASCENDING,
        )
        assert list(data.parameters.items()) == [
            ("nationality", "Côte d'Ivoire"),
            ("position", "CAM"),
            ("minOverall", "70"),
            ("maxOverall", "85"),
            ("sort", "asc"),
        ]

    def test_inverted_range_raises(self) -> None:
        """Test that min above max is rejected."""
        with pytest.raises(ValueError):
            PlayerFilterData(min_overall=90, max_overall=80)

    def test_updated_returns_copy(self) -> None:
        """Test that updated leaves the original untouched."""
        original = PlayerFilterData.default()
        changed = original.updated(position=Position.GK)
        assert changed.position == Position.GK
        assert original.position is None
        assert changed.is_default is False


class TestResponseBodies:
    """Tests for endpoint response bodies."""

    def test_players_body(self) -> None:
        """Test decoding the player search body."""
        body = GetPlayersResponseBody.from_dict(
            {"players": [make_player_json("1"), make_player_json("2")]}
        )
        assert [p.id for p in body.players] == ["1", "2"]

    def test_players_body_missing_key_raises(self) -> None:
        """Test that a body without players fails decoding."""
        with pytest.raises(KeyError):
            GetPlayersResponseBody.from_dict({})

    def test_search_body_defaults(self) -> None:
        """Test that search results default to empty lists."""
        body = GetSearchResponseBody.from_dict({"clubs": [{"teamId": "1", "name": "Ajax", "logoURL": "x"}]})
        assert body.players == []
        assert body.clubs[0].name == "Ajax"

    def test_leagues_body(self) -> None:
        """Test decoding the league listing."""
        body = GetLeaguesResponseBody.from_dict(
            {"leagues": [{"leagueId": "53", "name": "LaLiga", "logoURL": "x"}]}
        )
        assert body.leagues[0].league_id == "53"

    def test_nationalities_body(self) -> None:
        """Test decoding nationalities."""
        body = GetNationalitiesBody.from_dict(
            {"nationalities": [{"name": "Brazil", "flagURL": "x"}, {"name": "Spain"}]}
        )
        assert body.nationalities == [Nationality("Brazil", "x"), Nationality("Spain")]

    def test_non_object_body_raises(self) -> None:
        """Test that a JSON array where an object is expected fails decoding."""
        with pytest.raises(TypeError):
            GetPlayersResponseBody.from_dict([])  # type: ignore[arg-type]

    def test_search_body_must_be_object(self) -> None:
        """Test that a JSON array search body fails with TypeError."""
        with pytest.raises(TypeError, match="search body"):
            GetSearchResponseBody.from_dict([])  # type: ignore[arg-type]
