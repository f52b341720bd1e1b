"""
Step definitions for the binding lifecycle scenarios.
"""

import re

from behave import given, then, when

from dns_token_broker.core.binding_manager import BindingManager


@given("the broker is configured with the mock agent")
def step_impl(context):
    """Configure a binding manager over a fresh data directory."""
    context.manager = BindingManager(context.test_config)
    assert context.manager.executor.agent.scripts == []


@given('"{hostname}" has been claimed')
@when('I claim "{hostname}"')
def step_impl(context, hostname):
    """Claim a hostname through the response contract."""
    context.response = context.manager.handle("create", {"hostname": hostname})
    if context.response["error"] is None:
        context.tokens[hostname] = context.response["token"]


@when('I update "{hostname}" to "{ip}"')
def step_impl(context, hostname, ip):
    """Update the hostname with the token it was issued."""
    token = context.tokens[hostname]
    context.response = context.manager.handle("update", {"token": token, "ip": ip})


@when('I delete "{hostname}"')
def step_impl(context, hostname):
    """Release the hostname."""
    token = context.tokens[hostname]
    context.response = context.manager.handle("delete", {"token": token})


@when('I update with token "{token}" to "{ip}"')
def step_impl(context, token, ip):
    """Update using an arbitrary token string."""
    context.response = context.manager.handle("update", {"token": token, "ip": ip})


@then("the request should succeed")
def step_impl(context):
    assert context.response["error"] is None, f"Unexpected error: {context.response['error']}"


@then('the request should fail with "{message}"')
def step_impl(context, message):
    assert context.response["error"] == message, f"Got {context.response}"


@then("I should receive a token")
def step_impl(context):
    assert re.fullmatch(r"[0-9a-f]{32}", context.response["token"])


@then('the response should report {record_type} "{ip}"')
def step_impl(context, record_type, ip):
    assert context.response.get(record_type.lower()) == ip, f"Got {context.response}"


@then('the last transaction should contain "{line}"')
def step_impl(context, line):
    scripts = context.manager.executor.agent.scripts
    assert scripts, "No transaction was sent"
    assert line in scripts[-1].splitlines(), scripts[-1]


@then("no transaction should have been sent")
def step_impl(context):
    assert context.manager.executor.agent.scripts == []


@then('"{hostname}" should be claimable again')
def step_impl(context, hostname):
    assert not context.manager.store.exists_hostname(hostname)
    assert context.manager.handle("create", {"hostname": hostname})["error"] is None
