"""romajify コマンドのテスト"""

import pytest

from romajify.__main__ import main


class TestCli:
    """サブコマンドとフラグ"""

    @pytest.mark.parametrize("argv,expected", [
        (["hepburn", "しんぶん"], "shinbun"),
        (["hepburn", "しんぶん", "--traditional"], "shimbun"),
        (["hepburn", "--upcase", "まっちゃ"], "MATCHA"),
        (["nihon", "ぢ"], "di"),
        (["nihon", "--upcase", "しゃしん"], "SYASIN"),
        (["kunrei", "ぢ"], "zi"),
        (["kunrei", "とうきょう"], "tokyo"),
    ])
    def test_output(self, capsys, argv, expected):
        assert main(argv) == 0
        assert capsys.readouterr().out == expected + "\n"

    def test_empty_text(self, capsys):
        assert main(["hepburn", ""]) == 0
        assert capsys.readouterr().out == "\n"

    def test_traditional_only_for_hepburn(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["nihon", "--traditional", "しんぶん"])
        assert excinfo.value.code == 2

    def test_missing_subcommand(self):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2

    def test_unknown_subcommand(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["wapuro", "かな"])
        assert excinfo.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])
        assert excinfo.value.code == 0
        assert "romajify 0.1.0" in capsys.readouterr().out
