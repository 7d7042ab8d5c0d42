"""Run the lobby server: python -m lobby."""

import uvicorn

from lobby.server.settings import LobbyServerSettings


def main() -> None:  # pragma: no cover
    settings = LobbyServerSettings()
    uvicorn.run("lobby.server.app:get_app", factory=True, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":  # pragma: no cover
    main()
