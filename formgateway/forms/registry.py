"""All form types served by the gateway"""
from formgateway.forms import company, fleet_worker, guard, quote

FORMS = {
    descriptor.key: descriptor
    for descriptor in (
        quote.DESCRIPTOR,
        guard.DESCRIPTOR,
        company.DESCRIPTOR,
        fleet_worker.DESCRIPTOR,
    )
}
