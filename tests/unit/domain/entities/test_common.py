from datetime import UTC
from datetime import datetime

from spotiwire.domain.entities.common import Image
from spotiwire.domain.entities.common import Saved
from spotiwire.domain.entities.common import largest_image
from spotiwire.domain.entities.music import Album

from tests.unit.factories.entities import ImageFactory


class TestImage:
    def test__missing_url(self) -> None:
        image = Image.model_validate({"height": 64})

        assert image.url is None
        assert image.height == 64
        assert image.width is None


class TestLargestImage:
    def test__none(self) -> None:
        assert largest_image(None) is None

    def test__unknown_sizes(self) -> None:
        image = Image(url="https://i.scdn.co/image/foo")
        assert largest_image([image]) == image

    def test__nominal(self) -> None:
        images = [
            ImageFactory.build(width=300, height=300),
            ImageFactory.build(width=640, height=640),
            ImageFactory.build(width=64, height=64),
        ]
        assert largest_image(images) == images[1]


class TestSaved:
    def test__item_identity(self) -> None:
        album = Album(id="foo")
        saved = Saved[Album](added_at="2023-11-05T18:30:00Z", item=album)

        assert saved.item is album
        assert saved.added_at == datetime(2023, 11, 5, 18, 30, tzinfo=UTC)
