import wave

import pygame
import pytest

from spacegame.node import Node
from spacegame.sound_player import SoundPlayerComponent


@pytest.fixture
def player():
    return Node().add_component(SoundPlayerComponent)


@pytest.fixture
def dummy_audio(monkeypatch):
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pygame.mixer.quit()
    yield
    pygame.mixer.quit()


@pytest.fixture
def wav_file(tmp_path):
    path = tmp_path / "tone.wav"
    with wave.open(str(path), "wb") as handle:
        handle.setnchannels(1)
        handle.setsampwidth(2)
        handle.setframerate(22050)
        handle.writeframes(b"\x00\x00" * 2205)
    return path


def test_defaults(player):
    assert player.wav_path is None
    assert player.playing is False
    assert player.loaded is False


def test_preload_without_path_fails(player):
    assert player.preload_wav() is False
    assert player.loaded is False


def test_preload_missing_file_fails(player, tmp_path, dummy_audio):
    player.wav_path = str(tmp_path / "missing.wav")
    assert player.preload_wav() is False
    assert player.loaded is False


def test_play_without_path_does_not_play(player):
    player.play()
    assert player.playing is False


def test_stop_when_not_loaded_leaves_state(player):
    player.playing = True
    player.stop()
    assert player.playing is True


def test_preload_play_stop(player, wav_file, dummy_audio):
    player.wav_path = str(wav_file)
    assert player.preload_wav() is True
    assert player.loaded is True
    player.play()
    assert player.playing is True
    player.stop()
    assert player.playing is False


def test_play_loads_on_demand(player, wav_file, dummy_audio):
    player.wav_path = str(wav_file)
    player.play()
    assert player.loaded is True
    assert player.playing is True


def test_detach_releases_sound(player, wav_file, dummy_audio):
    player.wav_path = str(wav_file)
    player.play()
    player.detach()
    assert player.loaded is False
    assert player.playing is False
    assert player.node.get_component(SoundPlayerComponent) is None