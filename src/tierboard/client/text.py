"""Text client for managing the leaderboard against a running server."""

import shlex
import sys

from tierboard.auth import CredentialChecker
from tierboard.client.api import ApiError, PlayerApiClient
from tierboard.client.forms import PlayerForm, filter_players
from tierboard.client.session import LoginGate, NotAuthenticatedError

HELP_TEXT = """
Available commands:
  /login <email> <password>     - Log in as the operator
  /logout                       - Log out
  /add name=.. tier=.. macetier=.. region=..
                                - Add a player (quote values with spaces)
  /edit <id> [field=value ...]  - Edit a player; omitted fields keep their value
  /list [search]                - List players, optionally filtered
  /delete <id>                  - Delete a player
  /help                         - Show this help
  quit/exit                     - Leave

Tiers: LT5, HT5, LT4, HT4, LT3, HT3, LT2, HT2, LT1, HT1
"""

# Accepted keys for /add and /edit, mapped to PlayerForm attributes
FIELD_ALIASES = {
    "name": "player_name",
    "playername": "player_name",
    "tier": "tier",
    "macetier": "macetier",
    "region": "region",
}


def parse_command(user_input: str) -> tuple[str, list[str]] | None:
    """Split input into a command and its arguments.

    Returns None for quit commands. Plain text without a slash is treated
    as an unknown command.
    """
    text = user_input.strip()

    if text.lower() in ("quit", "exit"):
        return None

    try:
        parts = shlex.split(text)
    except ValueError:
        return "invalid", []

    if not parts:
        return "", []

    cmd = parts[0].lower().lstrip("/")
    return cmd, parts[1:]


def parse_fields(args: list[str]) -> dict[str, str]:
    """Turn key=value arguments into PlayerForm attribute values.

    Raises:
        ValueError: If an argument is not key=value or the key is unknown.
    """
    fields: dict[str, str] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep:
            raise ValueError(f"Expected field=value, got '{arg}'")
        attr = FIELD_ALIASES.get(key.lower())
        if attr is None:
            raise ValueError(f"Unknown field '{key}'")
        fields[attr] = value
    return fields


def format_player(player: dict) -> str:
    """Format one listed player on a single line."""
    tiers = " / ".join(
        f"{label} {value}"
        for label, value in (("tier", player.get("tierClass")), ("mace", player.get("maceTier")))
        if value
    )
    return (
        f"#{player['id']:<4} {player['playerName']:<20} {player['region']:<8} "
        f"{tiers:<22} {player['points']:>4} pts  {player['playerTitle']}"
    )


def format_errors(errors: dict[str, str]) -> str:
    return "\n".join(f"[ERROR] {message}" for message in errors.values())


class TextClient:
    """Command handler for the text client; each command returns its output."""

    def __init__(self, api: PlayerApiClient, checker: CredentialChecker):
        self.api = api
        self.gate = LoginGate(checker)
        self.players: list[dict] = []

    def handle(self, cmd: str, args: list[str]) -> str:
        if cmd == "help":
            return HELP_TEXT
        if cmd == "login":
            return self.login(args)
        if cmd == "logout":
            self.gate.logout()
            return "Logged out"

        try:
            if cmd == "add":
                self.gate.require_auth("form")
                return self.add(args)
            if cmd == "edit":
                self.gate.require_auth("form")
                return self.edit(args)
            if cmd == "list":
                self.gate.require_auth("players")
                return self.list_players(" ".join(args))
            if cmd == "delete":
                self.gate.require_auth("players")
                return self.delete(args)
        except NotAuthenticatedError as e:
            return f"[LOGIN REQUIRED] {e}"

        if cmd == "":
            return ""
        if cmd == "invalid":
            return "Could not parse input (unbalanced quotes?)"
        return f"Unknown command: /{cmd}\nType /help for available commands"

    def login(self, args: list[str]) -> str:
        email = args[0] if args else ""
        password = args[1] if len(args) > 1 else ""
        errors = self.gate.login(email, password)
        if errors:
            return format_errors(errors)
        return "Logged in. Type /list to see players or /add to add one."

    def add(self, args: list[str]) -> str:
        try:
            form = PlayerForm(**parse_fields(args))
        except ValueError as e:
            return f"[ERROR] {e}"
        return self._submit(form)

    def edit(self, args: list[str]) -> str:
        if not args:
            return "Usage: /edit <id> [field=value ...]"
        try:
            player_id = int(args[0])
            fields = parse_fields(args[1:])
        except ValueError as e:
            return f"[ERROR] {e}"

        player = self._find_player(player_id)
        if player is None:
            return f"[ERROR] No listed player with id {player_id}. Run /list first."

        form = PlayerForm.from_player(player)
        for attr, value in fields.items():
            setattr(form, attr, value)
        return self._submit(form)

    def list_players(self, term: str = "") -> str:
        try:
            self.players = self.api.list_players()
        except ApiError as e:
            return f"[ERROR] {e.message}\nType /list to retry."

        shown = filter_players(self.players, term)
        if not shown:
            return "No players found matching your search" if term else "No players found"
        return "\n".join(format_player(player) for player in shown)

    def delete(self, args: list[str]) -> str:
        if not args:
            return "Usage: /delete <id>"
        try:
            player_id = int(args[0])
        except ValueError:
            return "Player ID must be a number"

        try:
            self.api.delete_player(player_id)
        except ApiError as e:
            return f"[ERROR] Error deleting player: {e.message}"

        self.players = [p for p in self.players if p["id"] != player_id]
        return f"Player {player_id} deleted"

    def _submit(self, form: PlayerForm) -> str:
        errors = form.validate()
        if errors:
            return format_errors(errors)

        try:
            if form.is_editing:
                response = self.api.update_player(form.editing_id, form.to_payload())
            else:
                response = self.api.insert_player(form.to_payload())
        except ApiError as e:
            return f"[ERROR] Error submitting form: {e.message}"

        player = response["player"]
        verb = "updated" if form.is_editing else "added"
        form.reset()
        return (
            f"Player successfully {verb}! "
            f"{player['playerName']}: {player['points']} pts, {player['playerTitle']}"
        )

    def _find_player(self, player_id: int) -> dict | None:
        if not self.players:
            try:
                self.players = self.api.list_players()
            except ApiError:
                return None
        for player in self.players:
            if player["id"] == player_id:
                return player
        return None


def main(api: PlayerApiClient, checker: CredentialChecker) -> None:
    """Run the interactive loop until quit or end of input."""
    client = TextClient(api, checker)
    print("Tierboard text client. Type /help for commands.")
    print("-" * 60)

    while True:
        try:
            user_input = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        parsed = parse_command(user_input)
        if parsed is None:
            break

        output = client.handle(*parsed)
        if output:
            print(output)


def run(base_url: str | None = None) -> None:
    """Run the text client against a server.

    Args:
        base_url: API base URL; defaults to the API_BASE_URL setting.
    """
    from tierboard.auth import load_credential_checker
    from tierboard.config import get_settings

    checker = load_credential_checker(get_settings())
    with PlayerApiClient(base_url=base_url) as api:
        try:
            api.health()
        except ApiError:
            print(f"Could not reach the server at {api.http.base_url}")
            print("Make sure the server is running: tierboard server")
            sys.exit(1)
        main(api, checker)
