from typing import Any

from pytest_bdd import parsers, when


@when(parsers.parse('the following block sizes are requested: {requests}'))
def block_sizes_requested(context: dict[str, Any], requests: str) -> None:
    input_lines = [context.get('seat_codes', ''), *requests.split(',')]
    context['result'] = context['use_case'].process_input(input_lines)
