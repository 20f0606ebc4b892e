import pytest

from loginsuite.ui_testing.framework.errors import InteractionTimeout
from loginsuite.ui_testing.pages.login_page import LoginPage
from loginsuite.unit.fakes import FakePage, FakeSession


FORM = {"id=username", "id=password", "css=button.radius"}
SUCCESS_BANNER = "You logged into a secure area!\n×"


def make_login_page(visible=FORM, texts=None):
    fake = FakePage(visible=set(visible), texts=texts)
    return LoginPage(FakeSession(fake)), fake


def test_locators_match_login_markup():
    assert LoginPage.USERNAME_FIELD.selector == "id=username"
    assert LoginPage.PASSWORD_FIELD.selector == "id=password"
    assert LoginPage.LOGIN_BUTTON.selector == "css=button.radius"
    assert LoginPage.FEEDBACK_BANNER.selector == "id=flash"


def test_open_navigates_to_login_url():
    login_page, fake = make_login_page()
    assert login_page.open() is login_page
    assert fake.url == "https://the-internet.herokuapp.com/login"


def test_submit_credentials_types_then_clicks():
    login_page, fake = make_login_page()
    login_page.submit_credentials("tomsmith", "SuperSecretPassword!")

    assert fake.values == {"id=username": "tomsmith", "id=password": "SuperSecretPassword!"}
    assert fake.actions()[-1] == "click css=button.radius"
    fills = [a for a in fake.actions() if a.startswith("fill")]
    assert fills == ["fill id=username", "fill id=password"]


def test_submit_credentials_without_form_times_out():
    login_page, fake = make_login_page(visible=set())
    with pytest.raises(InteractionTimeout):
        login_page.submit_credentials("tomsmith", "SuperSecretPassword!")
    assert not any(a.startswith("click") for a in fake.actions())


def test_is_ready_when_all_form_elements_visible():
    login_page, _ = make_login_page()
    assert login_page.is_ready() is True


@pytest.mark.parametrize("missing", sorted(FORM))
def test_is_ready_false_when_any_element_missing(missing):
    login_page, _ = make_login_page(visible=FORM - {missing})
    assert login_page.is_ready() is False


def test_is_ready_stops_at_first_missing_element():
    login_page, fake = make_login_page(visible={"id=password", "css=button.radius"})
    assert login_page.is_ready() is False
    assert fake.actions() == ["wait_for:visible id=username"]


def test_has_feedback_message_reflects_banner_visibility():
    login_page, _ = make_login_page()
    assert login_page.has_feedback_message() is False

    login_page, _ = make_login_page(visible=FORM | {"id=flash"})
    assert login_page.has_feedback_message() is True


def test_feedback_message_text_returns_trimmed_banner():
    login_page, _ = make_login_page(
        visible=FORM | {"id=flash"},
        texts={"id=flash": f"\n  {SUCCESS_BANNER}  \n"},
    )
    assert login_page.feedback_message_text() == SUCCESS_BANNER


def test_feedback_message_text_raises_without_banner():
    login_page, _ = make_login_page()
    with pytest.raises(InteractionTimeout):
        login_page.feedback_message_text()


def test_error_and_success_share_one_banner():
    error = "Your username is invalid!\n×"
    login_page, _ = make_login_page(visible=FORM | {"id=flash"}, texts={"id=flash": error})

    assert login_page.has_feedback_message()
    text = login_page.feedback_message_text()
    assert "You logged into a secure area!" not in text
    assert "Your username is invalid!" in text
