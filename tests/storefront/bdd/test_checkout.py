"""BDD tests for checkout."""

from protean import current_domain
from pytest_bdd import parsers, scenarios, then, when
from storefront.cart.checkout import Checkout
from storefront.errors import StorefrontError

scenarios("features/checkout.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the shopper checks out")
def shopper_checks_out(shopper_id, error):
    try:
        current_domain.process(Checkout(user_id=shopper_id), asynchronous=False)
    except StorefrontError as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the checkout succeeds")
def checkout_succeeds(error):
    assert error["exc"] is None, f"Checkout failed: {error['exc']}"


@then(parsers.cfparse('the checkout fails with "{message}"'))
def checkout_fails(error, message):
    assert error["exc"] is not None, "Expected checkout to fail"
    assert error["exc"].message == message


@then(parsers.cfparse("the shopper has {amount:d} in their wallet"))
def shopper_wallet_is(shopper_id, load_user, amount):
    assert load_user(shopper_id).wallet_money == amount
