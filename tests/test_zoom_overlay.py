from bs4 import BeautifulSoup

from zoom_overlay import OverlayState, wire_overlays

PAGE = """<!DOCTYPE html>
<html><head></head><body><main>
<div class="avatar">
  <img class="skill-img" src="./img/me.jpg" alt="me" />
  <p>caption</p>
  <div class="more-item"><div class="more-inf"><div class="more-base">
    <span class="close">&times;</span><div class="scroll"><img class="skill-img-big" src="./img/me.jpg" /></div>
  </div></div></div>
</div>
<div class="col-12">
  <img class="skill-img" src="./img/cert.png" alt="cert" />
  <div class="more-item"><div class="more-inf"><div class="more-base">
    <span class="close">&times;</span>
  </div></div></div>
</div>
<div><img class="skill-img" src="./img/lonely.png" /></div>
</main></body></html>"""


def _wired(**kw):
    soup = BeautifulSoup(PAGE, "html.parser")
    return soup, wire_overlays(soup, min_width=1024, **kw)


def test_each_image_paired_with_its_overlay():
    soup, overlays = _wired()
    assert len(overlays) == 2
    avatar, cert, lonely = soup.select("img.skill-img")
    assert not lonely.has_attr("data-zoom-id")
    for img in (avatar, cert):
        zoom_id = img["data-zoom-id"]
        box = img.find_parent("div").select_one(".more-item")
        assert box["data-zoom-id"] == zoom_id
        assert box.select_one(".close")["data-zoom-id"] == zoom_id
        assert overlays.state(zoom_id) is OverlayState.HIDDEN


def test_ids_are_stable_across_builds():
    _, first = _wired()
    _, second = _wired()
    assert first.ids() == second.ids()


def test_narrow_viewport_click_does_nothing():
    soup, overlays = _wired()
    img = soup.select_one("img.skill-img")
    assert overlays.handle_click(img, viewport_width=800) is OverlayState.HIDDEN
    assert overlays.visible() == []


def test_wide_viewport_opens_only_the_clicked_overlay():
    soup, overlays = _wired()
    avatar, cert, _ = soup.select("img.skill-img")
    assert overlays.handle_click(cert, viewport_width=1024) is OverlayState.VISIBLE
    assert overlays.visible() == [cert["data-zoom-id"]]
    assert overlays.state(avatar["data-zoom-id"]) is OverlayState.HIDDEN


def test_close_control_hides_overlay():
    soup, overlays = _wired()
    cert = soup.select("img.skill-img")[1]
    overlays.handle_click(cert, 1440)
    close = cert.find_next_sibling("div").select_one(".close")
    assert overlays.handle_click(close, 1440) is OverlayState.HIDDEN


def test_background_click_hides_but_content_click_does_not():
    soup, overlays = _wired()
    avatar = soup.select_one("img.skill-img")
    zoom_id = avatar["data-zoom-id"]
    overlays.handle_click(avatar, 1280)

    content = soup.select_one(".avatar .more-base")
    assert overlays.handle_click(content, 1280) is None
    assert overlays.state(zoom_id) is OverlayState.VISIBLE

    background = soup.select_one(".avatar .more-inf")
    assert overlays.handle_click(background, 1280) is OverlayState.HIDDEN


def test_script_and_style_injected_with_threshold():
    soup, _ = _wired()
    script = soup.body.find_all("script")[-1].string
    assert "var MIN_WIDTH = 1024;" in script
    assert "data-zoom-id" in soup.head.style.string


def test_nothing_injected_without_zoomable_images():
    soup = BeautifulSoup("<html><head></head><body><main></main></body></html>", "html.parser")
    overlays = wire_overlays(soup)
    assert len(overlays) == 0
    assert soup.find("script") is None


def test_images_sharing_an_overlay_share_its_id():
    soup = BeautifulSoup(
        '<main><div>'
        '<img class="skill-img" src="a.png" /><p>x</p><img class="skill-img" src="b.png" />'
        '<p>y</p><div class="more-item"><div class="more-inf"><span class="close">x</span></div></div>'
        '</div></main>', "html.parser")
    overlays = wire_overlays(soup, min_width=1024, inject=False)
    a, b = soup.select("img.skill-img")
    box = soup.select_one(".more-item")
    assert a["data-zoom-id"] == b["data-zoom-id"] == box["data-zoom-id"]
    assert len(overlays) == 1
    assert overlays.handle_click(a, 1280) is OverlayState.VISIBLE
    assert overlays.visible() == [box["data-zoom-id"]]
