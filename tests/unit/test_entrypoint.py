from unittest.mock import patch

from pokedex.__main__ import main


def test_main_serves_the_api_with_uvicorn(monkeypatch):
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "9000")

    with patch("pokedex.__main__.uvicorn.run") as run:
        main()

    run.assert_called_once_with("pokedex.main:app", host="0.0.0.0", port=9000)
