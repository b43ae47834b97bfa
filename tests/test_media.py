from ali_importer.extractors.base import CappedUniqueList, balanced_literal
from ali_importer.extractors.media import extract_images, extract_videos

from .helpers import make_page

CDN = "https://ae01.alicdn.com/kf"


def test_cdn_images_capped_in_first_seen_order():
    urls = [f"{CDN}/S{i:02d}.jpg" for i in range(20)]
    body = "".join(f'<img src="{u}">' for u in urls)
    assert extract_images(make_page(body=body), limit=15) == urls[:15]


def test_og_image_and_cdn_duplicate_kept_once_at_first_position():
    og = f"{CDN}/main.jpg"
    html = make_page(
        f'<meta property="og:image" content="{og}">',
        f'<img src="{CDN}/other.png"><img src="{og}">',
    )
    assert extract_images(html) == [og, f"{CDN}/other.png"]


def test_json_image_lists_are_unescaped():
    body = (
        '<script>{"imagePathList":["https:\\/\\/ae01.alicdn.com\\/kf\\/A.jpg","\\/\\/relative.jpg"],'
        '"galleryUrls":["https://img.alicdn.com/imgextra/B.webp"]}</script>'
    )
    assert extract_images(make_page(body=body)) == [
        "https://ae01.alicdn.com/kf/A.jpg",
        "https://img.alicdn.com/imgextra/B.webp",
    ]


def test_thumbnails_and_avatars_are_skipped():
    body = (
        f'<img src="{CDN}/avatar/u1.jpg">'
        f'<img src="{CDN}/logo_icon.png">'
        f'<img src="{CDN}/p1.jpg_50x50.jpg">'
        f'<img src="{CDN}/p1.jpg_100x100.jpg">'
        f'<img src="{CDN}/p1.jpg">'
        '<img src="https://example.com/not-cdn.jpg">'
    )
    assert extract_images(make_page(body=body)) == [f"{CDN}/p1.jpg"]


def test_og_image_url_variant():
    html = make_page('<meta property="og:image:url" content="https://cdn.example/p.jpg">')
    assert extract_images(html) == ["https://cdn.example/p.jpg"]


def test_videos_from_module_and_mp4_links():
    body = (
        '<script>{"videoModule": {"videoId": 1, "videoUrl": "https://video.aliexpress-media.com/play/a.mp4", '
        '"cover": {"w": 1}}, "x": "https:\\/\\/cloud.video.alibaba.com\\/b.mp4"}</script>'
        '<video src="https://video.aliexpress-media.com/play/a.mp4"></video>'
    )
    assert extract_videos(make_page(body=body)) == [
        "https://video.aliexpress-media.com/play/a.mp4",
        "https://cloud.video.alibaba.com/b.mp4",
    ]


def test_malformed_video_module_is_ignored():
    body = '<script>{"videoModule": {"videoUrl": broken}}</script>'
    assert extract_videos(make_page(body=body)) == []


def test_videos_capped():
    body = "".join(f'<source src="https://v.example/{i}.mp4">' for i in range(8))
    assert len(extract_videos(make_page(body=body), limit=5)) == 5


def test_capped_unique_list():
    items = CappedUniqueList(2)
    assert items.add("a")
    assert not items.add("a")
    assert not items.add("")
    assert items.add("b")
    assert not items.add("c")
    assert items.to_list() == ["a", "b"]


def test_balanced_literal_skips_brackets_in_strings():
    html = '{"list": [{"name": "a]b"}, [1, 2]], "next": 1}'
    assert balanced_literal(html, "list") == '[{"name": "a]b"}, [1, 2]]'
    assert balanced_literal(html, "missing") is None


def test_og_image_after_meta_with_angle_bracket():
    html = make_page(
        '<meta property="og:title" content="Cable > 2m">'
        '<meta property="og:image" content="https://cdn.example/cable.jpg">'
    )
    assert extract_images(html) == ["https://cdn.example/cable.jpg"]
