"""Tests for the client-side pieces."""

import itertools

import httpx
import pytest

from tierboard.client.api import ApiError, PlayerApiClient
from tierboard.client.forms import LoginForm, PlayerForm, filter_players
from tierboard.client.session import LoginGate, NotAuthenticatedError
from tierboard.client.text import TextClient, format_player, parse_command, parse_fields
from tierboard.ranking.validation import find_problems, validate_player

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "hunter2"


@pytest.fixture
def player_api(api_client):
    """PlayerApiClient talking to the in-process app."""
    return PlayerApiClient(http=api_client)


@pytest.fixture
def text_client(player_api, checker):
    """Text client already logged in."""
    client = TextClient(player_api, checker)
    client.handle("login", [ADMIN_EMAIL, ADMIN_PASSWORD])
    return client


def mock_api(handler) -> PlayerApiClient:
    transport = httpx.MockTransport(handler)
    return PlayerApiClient(http=httpx.Client(transport=transport, base_url="http://test"))


class TestPlayerForm:
    """Tests for the add/edit form."""

    def test_validate_reports_every_problem(self):
        """Test the form lists all broken rules, not just the first."""
        errors = PlayerForm(tier="bad", macetier="worse").validate()
        assert errors == {
            "playerName": "Player name is required",
            "region": "Region is required",
            "tier": "Invalid tier. Use: LT5, HT5, LT4, HT4, LT3, HT3, LT2, HT2, LT1, HT1",
            "macetier": "Invalid macetier. Use: LT5, HT5, LT4, HT4, LT3, HT3, LT2, HT2, LT1, HT1",
        }

    def test_tier_required_message(self):
        """Test the client wording for the missing-tier rule."""
        errors = PlayerForm(player_name="Ann", region="EU").validate()
        assert errors == {"tierRequired": "At least one tier (Tier or Macetier) is required"}

    def test_preview(self):
        """Test the live score matches the server's formula."""
        preview = PlayerForm(tier="ht3", macetier="LT5").preview()
        assert preview.points == 11
        assert preview.title == "Combat Novice"

    def test_to_payload_trims(self):
        """Test the request body is trimmed."""
        form = PlayerForm(player_name=" Ann ", tier=" lt1", macetier="", region="EU ")
        assert form.to_payload() == {
            "playerName": "Ann",
            "tier": "lt1",
            "macetier": "",
            "region": "EU",
        }

    def test_from_player(self):
        """Test editing prefills from a listed row, null tiers as blanks."""
        form = PlayerForm.from_player(
            {"id": 4, "playerName": "Ann", "tierClass": "LT1", "maceTier": None, "region": "EU"}
        )
        assert form.is_editing
        assert form.editing_id == 4
        assert form.tier == "LT1"
        assert form.macetier == ""

    def test_reset(self):
        """Test reset clears the form and leaves edit mode."""
        form = PlayerForm(player_name="Ann", tier="LT1", region="EU", editing_id=2)
        form.reset()
        assert form == PlayerForm()


class TestFormServerEquivalence:
    """The form and the API must reach the same verdict on any input."""

    NAMES = [None, "", "  ", "Ann"]
    TIERS = [None, "", " ", "LT1", "lt1", "LT", " HT2 ", "XX9"]
    REGIONS = [None, "", "EU"]

    def test_same_verdict(self):
        """Test acceptance and the first reported rule agree."""
        for name, tier, macetier, region in itertools.product(
            self.NAMES, self.TIERS, self.TIERS, self.REGIONS
        ):
            form = PlayerForm(
                player_name=name or "", tier=tier or "", macetier=macetier or "", region=region or ""
            )
            form_errors = form.validate()
            server = validate_player(name, tier, macetier, region)

            assert server.is_ok == (not form_errors)
            if form_errors:
                first = find_problems(name, tier, macetier, region)[0]
                assert list(form_errors)[0] == first.value

    def test_same_score(self):
        """Test the form preview equals what the server would store."""
        for tier, macetier in itertools.product(["LT5", "ht1", "LT2", ""], repeat=2):
            server = validate_player("Ann", tier, macetier, "EU")
            if server.is_err:
                continue
            preview = PlayerForm(tier=tier, macetier=macetier).preview()
            assert preview.points == server.unwrap().points
            assert preview.title == server.unwrap().player_title


class TestLoginForm:
    """Tests for the login form."""

    def test_valid_login(self, checker):
        """Test the configured pair passes."""
        assert LoginForm(ADMIN_EMAIL, ADMIN_PASSWORD).validate(checker) == {}

    def test_required_fields(self, checker):
        """Test both fields are required."""
        assert LoginForm().validate(checker) == {
            "email": "Email is required",
            "password": "Password is required",
        }

    def test_email_format(self, checker):
        """Test malformed emails are flagged before the checker runs."""
        errors = LoginForm("not-an-email", ADMIN_PASSWORD).validate(checker)
        assert errors == {"email": "Please enter a valid email"}

    def test_wrong_password(self, checker):
        """Test a rejected pair flags both fields."""
        errors = LoginForm(ADMIN_EMAIL, "wrong").validate(checker)
        assert errors == {"email": "Invalid credentials", "password": "Invalid credentials"}


class TestLoginGate:
    """Tests for the in-memory login gate."""

    def test_login_logout(self, checker):
        """Test the flag follows login and logout."""
        gate = LoginGate(checker)
        assert not gate.authenticated

        assert gate.login(ADMIN_EMAIL, ADMIN_PASSWORD) == {}
        assert gate.authenticated
        gate.require_auth("players")

        gate.logout()
        assert not gate.authenticated

    def test_protected_views(self, checker):
        """Test only the form and players views are guarded."""
        gate = LoginGate(checker)
        gate.require_auth("login")
        with pytest.raises(NotAuthenticatedError):
            gate.require_auth("form")
        with pytest.raises(NotAuthenticatedError):
            gate.require_auth("players")

    def test_failed_login_stays_out(self, checker):
        """Test bad credentials leave the flag unset."""
        gate = LoginGate(checker)
        assert gate.login(ADMIN_EMAIL, "nope")
        assert not gate.authenticated


class TestFilterPlayers:
    """Tests for list search."""

    PLAYERS = [
        {"id": 1, "playerName": "Ann", "region": "EU", "playerTitle": "Combat Cadet",
         "tierClass": "LT1", "maceTier": None},
        {"id": 2, "playerName": "Bo", "region": "NA", "playerTitle": "Rookie",
         "tierClass": None, "maceTier": "HT5"},
    ]

    def test_empty_term(self):
        """Test no term returns everything."""
        assert filter_players(self.PLAYERS, "") == self.PLAYERS

    @pytest.mark.parametrize(
        "term,ids",
        [("ann", [1]), ("na", [2]), ("combat", [1]), ("ht5", [2]), ("lt", [1]), ("zzz", [])],
    )
    def test_matches_fields(self, term, ids):
        """Test matching on name, region, title and tiers."""
        assert [p["id"] for p in filter_players(self.PLAYERS, term)] == ids


class TestPlayerApiClient:
    """Tests for PlayerApiClient."""

    def test_crud_round_trip(self, player_api):
        """Test insert, list, update and delete through the client."""
        created = player_api.insert_player(
            {"playerName": "Ann", "tier": "LT1", "macetier": "", "region": "EU"}
        )
        player_id = created["player"]["id"]
        assert [p["id"] for p in player_api.list_players()] == [player_id]

        updated = player_api.update_player(
            player_id, {"playerName": "Ann", "tier": "HT1", "macetier": "", "region": "EU"}
        )
        assert updated["player"]["points"] == 60

        assert player_api.delete_player(player_id) == {"message": "Player deleted successfully"}
        assert player_api.list_players() == []

    def test_server_error_message(self, player_api):
        """Test the API's error text is surfaced."""
        with pytest.raises(ApiError) as exc_info:
            player_api.insert_player({"playerName": "Ann", "tier": "", "macetier": "", "region": "EU"})
        assert exc_info.value.message == "At least one tier is required"
        assert exc_info.value.status_code == 400

    def test_not_found(self, player_api):
        """Test a 404 carries the server message."""
        with pytest.raises(ApiError) as exc_info:
            player_api.delete_player(12345)
        assert exc_info.value.message == "Player not found"
        assert exc_info.value.status_code == 404

    def test_default_message_without_body(self):
        """Test a non-JSON failure falls back to the operation's message."""
        api = mock_api(lambda request: httpx.Response(502, text="bad gateway"))
        with pytest.raises(ApiError) as exc_info:
            api.list_players()
        assert exc_info.value.message == "Failed to fetch players"

    def test_transport_failure(self):
        """Test connection errors become ApiError."""
        def refuse(request):
            raise httpx.ConnectError("refused", request=request)

        api = mock_api(refuse)
        with pytest.raises(ApiError) as exc_info:
            api.insert_player({})
        assert exc_info.value.message == "Failed to add player"
        assert exc_info.value.status_code is None

    def test_wrapped_list(self):
        """Test a {"players": [...]} body is unwrapped."""
        api = mock_api(lambda request: httpx.Response(200, json={"players": [{"id": 1}]}))
        assert api.list_players() == [{"id": 1}]


class TestTextCommands:
    """Tests for text client parsing and formatting."""

    def test_parse_command(self):
        """Test commands, quoted arguments and quit."""
        assert parse_command("/add name='Ann Lee' tier=LT1") == ("add", ["name=Ann Lee", "tier=LT1"])
        assert parse_command("  /LIST eu ") == ("list", ["eu"])
        assert parse_command("quit") is None
        assert parse_command("") == ("", [])

    def test_parse_fields(self):
        """Test key=value arguments map to form attributes."""
        assert parse_fields(["name=Ann", "Region=EU", "macetier="]) == {
            "player_name": "Ann",
            "region": "EU",
            "macetier": "",
        }
        with pytest.raises(ValueError):
            parse_fields(["colour=red"])
        with pytest.raises(ValueError):
            parse_fields(["Ann"])

    def test_format_player(self):
        """Test a listed row renders its tiers and title."""
        line = format_player(
            {"id": 1, "playerName": "Ann", "region": "EU", "tierClass": "LT1",
             "maceTier": None, "points": 45, "playerTitle": "Combat Cadet"}
        )
        assert "Ann" in line
        assert "tier LT1" in line
        assert "mace" not in line
        assert "45 pts" in line


class TestTextClient:
    """Tests for text client commands against the in-process API."""

    def test_requires_login(self, player_api, checker):
        """Test protected commands are refused before login."""
        client = TextClient(player_api, checker)
        assert client.handle("list", []).startswith("[LOGIN REQUIRED]")
        assert client.handle("add", ["name=Ann"]).startswith("[LOGIN REQUIRED]")

    def test_login_errors(self, player_api, checker):
        """Test login problems are printed."""
        client = TextClient(player_api, checker)
        assert "Invalid credentials" in client.handle("login", [ADMIN_EMAIL, "bad"])
        assert not client.gate.authenticated

    def test_add_list_edit_delete(self, text_client):
        """Test a full session against the API."""
        added = text_client.handle("add", ["name=Ann", "tier=lt1", "region=EU"])
        assert added == "Player successfully added! Ann: 45 pts, Combat Cadet"

        listing = text_client.handle("list", [])
        assert "Ann" in listing
        player_id = text_client.players[0]["id"]

        edited = text_client.handle("edit", [str(player_id), "macetier=HT1"])
        assert edited == "Player successfully updated! Ann: 105 pts, Combat Ace"

        assert text_client.handle("delete", [str(player_id)]) == f"Player {player_id} deleted"
        assert text_client.handle("list", []) == "No players found"

    def test_add_shows_form_errors(self, text_client):
        """Test client-side validation stops bad input before the request."""
        output = text_client.handle("add", ["name=Ann", "region=EU"])
        assert output == "[ERROR] At least one tier (Tier or Macetier) is required"

    def test_search(self, text_client):
        """Test /list filters by term."""
        text_client.handle("add", ["name=Ann", "tier=LT1", "region=EU"])
        text_client.handle("add", ["name=Bo", "tier=LT5", "region=NA"])
        assert "Bo" not in text_client.handle("list", ["ann"])
        assert text_client.handle("list", ["zzz"]) == "No players found matching your search"

    def test_delete_missing(self, text_client):
        """Test API errors are shown inline."""
        assert text_client.handle("delete", ["999"]) == "[ERROR] Error deleting player: Player not found"

    def test_list_failure_offers_retry(self, checker):
        """Test an unreachable server shows an error with a retry hint."""
        def refuse(request):
            raise httpx.ConnectError("refused", request=request)

        client = TextClient(mock_api(refuse), checker)
        client.handle("login", [ADMIN_EMAIL, ADMIN_PASSWORD])
        output = client.handle("list", [])
        assert output.startswith("[ERROR] Failed to fetch players")
        assert "/list to retry" in output

    def test_unknown_command(self, text_client):
        """Test unknown commands point at /help."""
        assert "Unknown command: /dance" in text_client.handle("dance", [])
