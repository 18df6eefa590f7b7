import json

import pytest

from arenaquest.cli import main

SAVE_TEXTS = {
    "AvailableSaves": "Saves:",
    "CreateNewSaveOption": ". New save",
    "ChooseSaveSlot": "Slot: ",
    "EnterNewSaveName": "Name: ",
    "NewSaveCreated": "Created {path}",
    "FailedToCreateSave": "Failed: {error}",
    "FailedToOpenSave": "Cannot open save",
    "GameSaved": "Saved {path}",
}
BATTLE_TEXTS = {
    "StartBossBattlePrompt": "Boss!",
    "GameWin": "You win",
    "GameLose": "You lose",
    "timeLimitSeconds": "5",
    "maxLen": "3",
    "minLen": "2",
}
DIALOGUES = {"StartFight": ["Roar"], "Victory": ["Fallen."], "Defeat": ["Ha."]}


def _write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))


def _feed_input(monkeypatch, *lines):
    it = iter(lines)

    def read(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", read)


@pytest.fixture
def game_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _write(tmp_path / "json" / "SaveManager.json", SAVE_TEXTS)
    _write(tmp_path / "json" / "Player.json", {"Name": "Hero", "Hp": "20", "Strength": "4"})
    _write(tmp_path / "json" / "InventoryManagerText.json", {})
    _write(tmp_path / "json" / "BattleManager.json", BATTLE_TEXTS)
    _write(tmp_path / "json" / "Goblin.json", {"Name": "Goblin", "Hp": "5", "Dialogues": DIALOGUES})
    _write(tmp_path / "json" / "Dragon.json", {"Name": "Dragon", "Hp": "0", "Dialogues": DIALOGUES})
    _write(
        tmp_path / "json" / "World1Info.json",
        {
            "StartPromt": "Welcome\n",
            "Choices": "1-5",
            "EnterText": "> ",
            "InvalidInput": "Bad choice",
            "PathEnemy1": "json/Goblin.json",
            "PathBoss": "json/Dragon.json",
        },
    )
    return tmp_path


def test_new_save_then_save_and_quit(game_dir, monkeypatch):
    _feed_input(monkeypatch, "1", "hero", "", "5")
    assert main([]) == 0
    data = json.loads((game_dir / "saves" / "hero.json").read_text())
    assert data["Name"] == "Hero"
    assert data["Hp"] == "20"


def test_boss_victory_ends_game(game_dir, monkeypatch, capsys):
    _feed_input(monkeypatch, "1", "hero", "", "2", "")
    assert main([]) == 0
    assert "You win" in capsys.readouterr().out


def test_missing_save_texts(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert "Failed to load save_text.json" in capsys.readouterr().err


def test_missing_world_file(game_dir, monkeypatch):
    _feed_input(monkeypatch, "1", "hero")
    assert main(["--world", "json/Nowhere.json"]) == 1
    assert (game_dir / "saves" / "hero.json").exists()