"""
Manual check against the live trivia backend.

This script verifies that:
1. The configured endpoint is reachable
2. The payload reports success and carries a count
3. Player records parse and a CSV export can be built

Usage:
    python -m scripts.check_endpoint
"""

from src.clients.trivia_client import FetchError, TriviaClient
from src.services.export import build_csv


def check_count(client: TriviaClient) -> bool:
    print("=" * 60)
    print("🧪 Check 1: Player Count")
    print("=" * 60)

    try:
        count = client.fetch_player_count()
    except FetchError as e:
        print(f"❌ {e.message}: {e.reason}")
        return False

    print(f"✅ Total players: {count}")
    return True


def check_players(client: TriviaClient) -> bool:
    print("\n" + "=" * 60)
    print("🧪 Check 2: Player Records")
    print("=" * 60)

    try:
        players = client.fetch_players()
    except FetchError as e:
        print(f"❌ {e.message}: {e.reason}")
        return False

    print(f"✅ Parsed {len(players)} players")
    if players:
        preview = build_csv(players[:5]).split("\n")
        print("\n📄 CSV preview:")
        for line in preview:
            print(f"   {line}")
    return True


def main():
    client = TriviaClient()
    print(f"🌐 Endpoint: {client.endpoint}\n")

    results = [check_count(client), check_players(client)]

    print("\n" + "=" * 60)
    print(f"{sum(results)}/{len(results)} checks passed")
    print("=" * 60)


if __name__ == "__main__":
    main()
