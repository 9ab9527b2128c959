import asyncio
import sys

from dotenv import load_dotenv
load_dotenv(".env")

from overwatch_tracker import OverwatchError, OverwatchPlayer, close_session
from overwatch_tracker.logger import logger


async def lookup(usernames: list[str]) -> int:
    failures = 0
    try:
        for username in usernames:
            try:
                async with OverwatchPlayer(username) as player:
                    await player.update()
                    print(f"{player.username} [{player.platform.value}/{player.region.value}] {player.profile_url}")
                    print(f"  level: {player.player_level} (prestige +{player.prestige_offset})")
                    print(f"  competitive rank: {player.competitive_rank} {player.competitive_rank_img or ''}")
                    print(f"  portrait: {player.profile_portrait_url}")
                    if player.competitive_stats is None:
                        print("  no competitive stats")
            except OverwatchError as e:
                logger.error("Lookup failed for %s: %s", username, e)
                failures += 1
    finally:
        await close_session()
    return failures


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("usage: python launcher.py <battletag or username> [...]")
        sys.exit(2)
    sys.exit(1 if asyncio.run(lookup(sys.argv[1:])) else 0)
