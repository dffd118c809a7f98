"""
bot_player.py - A random-walking Nuggets player
===============================================

Joins a running server and sends random movement keys until GAMEOVER.
Handy for watching a game with a spectator client or for load testing.

    python bot_player.py HOST PORT [NAME]
"""

import random
import socket
import sys

KEYS = "hjklyubnHJKLYUBN"


def main() -> int:
    if len(sys.argv) < 3:
        print("usage: python bot_player.py HOST PORT [NAME]", file=sys.stderr)
        return 1
    server = (sys.argv[1], int(sys.argv[2]))
    name = sys.argv[3] if len(sys.argv) > 3 else "bot"

    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.settimeout(0.2)
    sock.sendto(f"PLAY {name}".encode(), server)

    try:
        while True:
            try:
                data, _ = sock.recvfrom(65507)
            except socket.timeout:
                sock.sendto(f"KEY {random.choice(KEYS)}".encode(), server)
                continue
            text = data.decode("utf-8", errors="replace")
            kind = text.split("\n", 1)[0].split(" ", 1)[0]
            if kind == "OK":
                print(f"Joined as {text.split()[1]}")
            elif kind == "GOLD":
                print(text)
            elif kind in ("NO", "QUIT") and not text.startswith("NO Cannot"):
                print(text)
                if kind == "QUIT" or "full" in text:
                    return 0
            elif kind == "GAMEOVER":
                print(text)
                return 0
    except KeyboardInterrupt:
        sock.sendto(b"KEY Q", server)
        return 0
    finally:
        sock.close()


if __name__ == "__main__":
    sys.exit(main())
