"""
Test API ảnh Unsplash: gắn ảnh cho từ vựng, gợi ý ảnh, cache
"""
from app.models import OxfordWord


def test_attach_image_without_results_returns_404(client, db_session, unsplash):
    """banana không có ảnh → 404, không sửa DB"""
    db_session.add(OxfordWord(term="banana", meaning="quả chuối"))
    db_session.commit()
    unsplash.urls = []
    
    response = client.post("/api/oxford/image", json={"term": "banana"})
    
    assert response.status_code == 404
    assert response.json() == {"error": "No image found"}
    db_session.expire_all()
    assert db_session.query(OxfordWord).filter_by(term="banana").one().image_url is None


def test_attach_image_updates_every_matching_term(client, db_session, unsplash):
    db_session.add_all([
        OxfordWord(term="apple", meaning="quả táo"),
        OxfordWord(term="Apple", meaning="táo (công ty)"),
        OxfordWord(term="map", meaning="bản đồ"),
    ])
    db_session.commit()
    unsplash.urls = ["https://images.unsplash.com/apple-small.jpg", "https://images.unsplash.com/other.jpg"]
    
    response = client.post("/api/oxford/image", json={"term": "APPLE"})
    
    assert response.status_code == 200
    assert response.json() == {
        "term": "APPLE",
        "image_url": "https://images.unsplash.com/apple-small.jpg",
        "updated": 2,
    }
    db_session.expire_all()
    images = {w.meaning: w.image_url for w in db_session.query(OxfordWord).all()}
    assert images["quả táo"] == "https://images.unsplash.com/apple-small.jpg"
    assert images["táo (công ty)"] == "https://images.unsplash.com/apple-small.jpg"
    assert images["bản đồ"] is None
    
    params = unsplash.requests[0].url.params
    assert params["per_page"] == "1"
    assert params["orientation"] == "squarish"


def test_attach_image_falls_back_to_regular_url(client, db_session, unsplash):
    db_session.add(OxfordWord(term="cat", meaning="con mèo"))
    db_session.commit()
    unsplash.urls = ["https://images.unsplash.com/cat-regular.jpg"]
    unsplash.use_regular = True
    
    response = client.post("/api/oxford/image", json={"term": "cat"})
    
    assert response.json()["image_url"] == "https://images.unsplash.com/cat-regular.jpg"


def test_attach_image_requires_term(client, unsplash):
    assert client.post("/api/oxford/image", json={}).json() == {"error": "term required"}
    
    response = client.post("/api/oxford/image", json={"term": "   "})
    assert response.status_code == 400
    assert unsplash.requests == []


def test_attach_image_upstream_failure(client, db_session, unsplash):
    db_session.add(OxfordWord(term="dog", meaning="con chó"))
    db_session.commit()
    unsplash.status_code = 403
    
    response = client.post("/api/oxford/image", json={"term": "dog"})
    
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch/save image"}


def test_image_search_caps_results(client, unsplash):
    unsplash.urls = [f"https://images.unsplash.com/tree-{i}.jpg" for i in range(20)]
    
    default = client.get("/api/oxford/image/search", params={"term": "tree"}).json()
    capped = client.get("/api/oxford/image/search", params={"term": "tree", "per": 50}).json()
    floored = client.get("/api/oxford/image/search", params={"term": "tree", "per": 0}).json()
    
    assert default["term"] == "tree"
    assert len(default["urls"]) == 8
    assert len(capped["urls"]) == 12
    assert len(floored["urls"]) == 1


def test_image_search_uses_cache(client, unsplash):
    unsplash.urls = ["https://images.unsplash.com/sun.jpg"]
    
    first = client.get("/api/oxford/image/search", params={"term": "sun", "per": 4})
    second = client.get("/api/oxford/image/search", params={"term": "sun", "per": 4})
    
    assert first.json() == second.json()
    assert len(unsplash.requests) == 1


def test_image_search_does_not_persist(client, db_session, unsplash):
    db_session.add(OxfordWord(term="sun", meaning="mặt trời"))
    db_session.commit()
    unsplash.urls = ["https://images.unsplash.com/sun.jpg"]
    
    client.get("/api/oxford/image/search", params={"term": "sun"})
    
    db_session.expire_all()
    assert db_session.query(OxfordWord).one().image_url is None


def test_image_search_errors(client, unsplash):
    assert client.get("/api/oxford/image/search").status_code == 400
    
    unsplash.status_code = 429
    response = client.get("/api/oxford/image/search", params={"term": "rain"})
    
    assert response.status_code == 500
    assert response.json() == {"error": "Unsplash 429"}


def test_attach_image_non_json_response(client, db_session, unsplash):
    db_session.add(OxfordWord(term="tree", meaning="cái cây"))
    db_session.commit()
    unsplash.raw_body = b"<html>Service Unavailable</html>"
    
    response = client.post("/api/oxford/image", json={"term": "tree"})
    
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch/save image"}
    db_session.expire_all()
    assert db_session.query(OxfordWord).one().image_url is None


def test_attach_image_json_not_an_object(client, db_session, unsplash):
    db_session.add(OxfordWord(term="tree", meaning="cái cây"))
    db_session.commit()
    unsplash.raw_body = b'["x"]'
    
    response = client.post("/api/oxford/image", json={"term": "tree"})
    
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch/save image"}


def test_image_search_malformed_responses(client, unsplash):
    unsplash.raw_body = b'["x"]'
    as_list = client.get("/api/oxford/image/search", params={"term": "moon"})
    
    unsplash.raw_body = b"<html></html>"
    as_html = client.get("/api/oxford/image/search", params={"term": "star"})
    
    unsplash.raw_body = b'{"results": "oops"}'
    bad_results = client.get("/api/oxford/image/search", params={"term": "sky"})
    
    for response in (as_list, as_html, bad_results):
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to search images"}


def test_image_search_skips_malformed_items(client, unsplash):
    unsplash.raw_body = b'{"results": ["x", {"urls": null}, {"urls": {"small": "ok.jpg"}}]}'
    
    response = client.get("/api/oxford/image/search", params={"term": "cloud"})
    
    assert response.status_code == 200
    assert response.json() == {"term": "cloud", "urls": ["ok.jpg"]}
