"""Tests for anime.toml quote loading."""

from anime_quotes.core.quotes import Quote, load_quotes

QUOTES = '''
[[quotes]]
japanese = "俺は海賊王になる男だ!"
romaji = "Ore wa kaizoku ou ni naru otoko da!"
anime = "One Piece"
character = "Monkey D. Luffy"
quote = "I'm the man who will become King of the Pirates!"
image = "images/luffy.png"

[[quotes]]
japanese = "諦めたらそこで試合終了ですよ"
anime = "Slam Dunk"
character = "Anzai"
quote = "If you give up, that's when the game is over."
'''


def _write(tmp_path, text):
    path = tmp_path / "anime.toml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadQuotes:
    def test_loads_records(self, tmp_path):
        quotes = load_quotes(_write(tmp_path, QUOTES))
        assert len(quotes) == 2
        first, second = quotes
        assert first.anime == "One Piece"
        assert first.romaji.startswith("Ore wa")
        assert second.romaji is None
        assert second.image is None
        assert second.image_key is None

    def test_relative_image_resolves_against_file(self, tmp_path):
        quotes = load_quotes(_write(tmp_path, QUOTES))
        expected = tmp_path.resolve() / "images" / "luffy.png"
        assert quotes[0].image == expected
        assert quotes[0].image_key == str(expected)

    def test_absolute_image_kept(self, tmp_path):
        target = tmp_path / "abs.png"
        text = f'''
[[quotes]]
japanese = "j"
anime = "a"
character = "c"
quote = "q"
image = "{target.as_posix()}"
'''
        assert load_quotes(_write(tmp_path, text))[0].image == target

    def test_missing_file(self, tmp_path, caplog):
        with caplog.at_level("ERROR"):
            assert load_quotes(tmp_path / "anime.toml") == []
        assert "failed to read" in caplog.text

    def test_invalid_toml(self, tmp_path):
        assert load_quotes(_write(tmp_path, "[[quotes]\n")) == []

    def test_no_quotes_key(self, tmp_path):
        assert load_quotes(_write(tmp_path, 'title = "x"\n')) == []

    def test_incomplete_entry_skipped(self, tmp_path, caplog):
        text = QUOTES + '''
[[quotes]]
anime = "Only an anime"
'''
        with caplog.at_level("WARNING"):
            quotes = load_quotes(_write(tmp_path, text))
        assert len(quotes) == 2
        assert "missing japanese" in caplog.text

    def test_quote_without_image(self):
        quote = Quote(japanese="j", anime="a", character="c", quote="q")
        assert quote.image_key is None
