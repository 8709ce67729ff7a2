import pytest

from hyper_forms import FormContext, FormerConfig, Form, Input


@pytest.fixture
def context() -> FormContext:
    """Form state with no open form."""
    return FormContext()


@pytest.fixture
def opened() -> FormContext:
    """Form state with a horizontal form open."""
    return FormContext(form=Form("horizontal"))


@pytest.fixture
def make_input(opened):
    """Build an Input bound to the open form unless told otherwise."""

    def make(type="text", name="email", label=None, value=None, attributes=None, **kwargs):
        kwargs.setdefault("context", opened)
        return Input(type, name, label, value, attributes, **kwargs)

    return make


@pytest.fixture
def manual_config() -> FormerConfig:
    """Configuration without automatic labels or live validation."""
    return FormerConfig(automatic_label=False, live_validation=False)
