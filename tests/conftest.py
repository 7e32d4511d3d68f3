import pytest
from django.contrib.auth.models import Permission

from shortcode_ui.fields import FieldTypeRegistry
from shortcode_ui.models import Post
from shortcode_ui.preview import PreviewService
from shortcode_ui.registry import ShortcodeRegistry
from shortcode_ui.shortcodes import ShortcodeEngine


@pytest.fixture
def engine():
    """Engine with a few plain handlers."""
    engine = ShortcodeEngine()
    engine.add_shortcode("a", lambda atts, content, tag, context: "X")
    engine.add_shortcode("b", lambda atts, content, tag, context: "")
    engine.add_shortcode(
        "echo",
        lambda atts, content, tag, context: context["engine"].shortcode_atts(
            {"value": ""}, atts, tag
        )["value"],
    )
    return engine


@pytest.fixture
def fields():
    return FieldTypeRegistry({"code": {"encode": True}})


@pytest.fixture
def registry(engine, fields):
    return ShortcodeRegistry(engine, fields)


@pytest.fixture
def posts():
    """In-memory documents keyed by id, for previews that need no database."""
    return {}


@pytest.fixture
def preview_service(engine, posts):
    return PreviewService(engine, post_loader=posts.get)


@pytest.fixture
def author(django_user_model):
    return django_user_model.objects.create_user(username="author", password="pw")


@pytest.fixture
def editor(django_user_model):
    user = django_user_model.objects.create_user(username="editor", password="pw")
    user.user_permissions.add(
        Permission.objects.get(codename="change_post", content_type__app_label="shortcode_ui")
    )
    return user


@pytest.fixture
def stranger(django_user_model):
    return django_user_model.objects.create_user(username="stranger", password="pw")


@pytest.fixture
def post(author):
    return Post.objects.create(title="Hello World", post_type="post", author=author)


@pytest.fixture
def page(author):
    return Post.objects.create(title="About", post_type="page", author=author)
