"""Command line entry points: run the API or play from a terminal."""

from __future__ import annotations

from typing import Any, Dict, Optional

import click
import httpx

from .client import ApiError, DarkTimerClient, TimerGame, run_until_stopped
from .core.config import API_URL, MAX_NAME_LENGTH, TARGET_TIME


def _wait_for_enter(prompt: str) -> None:
    click.prompt(prompt, default="", show_default=False, prompt_suffix="")


def _describe_player(player: Optional[Dict[str, Any]]) -> str:
    if not player:
        return "Nobody has hit a perfect stop yet."
    attempts = player["firstPerfectAttempt"]
    plural = "" if attempts == 1 else "s"
    return f'{player["name"]} did it in {attempts} attempt{plural} - "{player["message"]}"'


@click.group()
def main() -> None:
    """Dark Timer: stop the clock at exactly 10.00 seconds."""


@main.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=3000, show_default=True, type=int)
@click.option("--reload", is_flag=True, help="Restart on code changes.")
def serve_command(host: str, port: int, reload: bool) -> None:
    """Run the API server."""
    import uvicorn

    uvicorn.run("darktimer.app:app", host=host, port=port, reload=reload)


@main.command("leaderboard")
@click.option("--api-url", default=API_URL, show_default=True)
@click.option("--limit", default=10, show_default=True, type=click.IntRange(1, 100))
def leaderboard_command(api_url: str, limit: int) -> None:
    """Print the ranking."""

    try:
        with DarkTimerClient(api_url) as client:
            board = client.leaderboard(limit)
    except (httpx.HTTPError, ApiError) as exc:
        raise click.ClickException(f"Leaderboard unavailable: {exc}") from exc

    click.echo(_describe_player(board["topPlayer"]))
    for position, player in enumerate(board["players"], start=1):
        click.echo(
            f"#{position:<3} {player['name']:<{MAX_NAME_LENGTH}} "
            f"{player['firstPerfectAttempt']:>5} attempts"
        )


@main.command("play")
@click.option("--api-url", default=API_URL, show_default=True)
@click.option("--name", prompt="Enter your name", help="Player name.")
@click.option("--slow", is_flag=True, help="Show the clock in 0.2s steps.")
def play_command(api_url: str, name: str, slow: bool) -> None:
    """Play in the terminal: Enter to start, Enter to stop."""

    name = name.strip()
    if not name or len(name) > MAX_NAME_LENGTH:
        raise click.BadParameter(
            f"must be 1-{MAX_NAME_LENGTH} characters", param_hint="--name"
        )

    game = TimerGame(name)
    with DarkTimerClient(api_url) as client:
        try:
            click.echo(_describe_player(client.leaderboard(1)["topPlayer"]))
        except (httpx.HTTPError, ApiError) as exc:
            click.echo(f"Leaderboard unavailable: {exc}", err=True)

        while True:
            _wait_for_enter(f"Press Enter to start, then stop at {TARGET_TIME:.2f}s ")
            submission = run_until_stopped(game, lambda: _wait_for_enter(""))
            click.echo(f"{game.display_time(slow)}s")

            try:
                result = client.submit_attempt(submission)
            except (httpx.HTTPError, ApiError) as exc:
                game.record_failure()
                click.echo(f"Stopped, but no rank ({exc})", err=True)
            else:
                game.record_result(result)
                if game.is_perfect:
                    click.echo(f"Perfect 10! Rank: #{game.rank}")
                else:
                    click.echo(_describe_player(result.get("topPlayer")))
                if game.is_new_record:
                    message = click.prompt(
                        "New record! Leave a message", default="", show_default=False
                    )
                    if message.strip():
                        try:
                            client.update_message(name, message)
                        except ApiError as exc:
                            click.echo(f"Message rejected: {exc.detail}", err=True)
                        except httpx.HTTPError as exc:
                            click.echo(f"Message not saved ({exc})", err=True)

            click.echo(f"Attempts: {game.attempts}")
            if not click.confirm("Try again?", default=True):
                break


__all__ = ["main"]


if __name__ == "__main__":
    main()
