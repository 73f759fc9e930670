from modules.recommendation.destination_catalog import DestinationCatalog, POPULAR_DESTINATIONS


def test_popular_is_ordered_by_score():
    names = [d.name for d in DestinationCatalog().popular()]
    assert names == ["Paris", "Bali", "Tokyo", "Santorini", "New York City"]

def test_search_matches_name_or_country():
    catalog = DestinationCatalog()
    assert [d.name for d in catalog.search("japan")] == ["Tokyo"]
    assert [d.name for d in catalog.search("new")] == ["New York City"]
    assert catalog.search("  ") == catalog.popular()
    assert catalog.search("Atlantis") == []

def test_image_url_for_known_and_unknown():
    catalog = DestinationCatalog(default_image_url="https://img.example.com/default.jpg")
    bali = catalog.get("Bali")
    assert catalog.image_url_for("Bali") == bali.image_url
    assert catalog.image_url_for("Lisbon") == "https://img.example.com/default.jpg"

def test_every_destination_has_an_image():
    assert all(d.image_url.startswith("https://") for d in POPULAR_DESTINATIONS)
