from oxideui.core import BuildContext, Color, Rect, RenderRect, RenderText
from oxideui.video import Video


def _children(widget):
    return widget.build(BuildContext()).render_object.children


def test_defaults():
    video = Video("clip.mp4")
    assert video.source == "clip.mp4"
    assert video.autoplay_enabled is False
    assert video.show_controls is True
    assert video.loops is False
    assert video.is_muted is False
    assert video.on_pause is None and video.on_ended is None


def test_builders():
    video = (
        Video("clip.mp4")
        .autoplay(True)
        .controls(False)
        .loop_playback(True)
        .muted(True)
        .with_key("v")
    )
    assert video.autoplay_enabled is True
    assert video.show_controls is False
    assert video.loops is True
    assert video.is_muted is True
    assert video.key == "v"


def test_default_size_is_640_by_360():
    background = _children(Video("clip.mp4"))[0]
    assert isinstance(background, RenderRect)
    assert background.rect == Rect(0.0, 0.0, 640.0, 360.0)
    assert background.color == Color.from_hex(0x000000)


def test_custom_size():
    background = _children(Video("clip.mp4").with_size(320.0, 180.0))[0]
    assert background.rect == Rect(0.0, 0.0, 320.0, 180.0)


def test_play_icon_is_inside_frame():
    children = _children(Video("clip.mp4").with_size(320.0, 180.0))
    icon = children[1]
    assert isinstance(icon, RenderText)
    assert icon.text == "▶"
    assert icon.style.color == Color.WHITE
    assert 0.0 < icon.position.x < 320.0
    assert 0.0 < icon.position.y < 180.0


def test_on_play_callback_is_kept():
    calls = []
    video = Video("clip.mp4").with_on_play(lambda: calls.append("play"))
    video.on_play()
    assert calls == ["play"]