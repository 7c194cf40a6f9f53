"""In-process event relay between bounded contexts.

With `event_processing = "sync"` Protean hands a committed event only to the
handlers of the domain that raised it. In production the Engine carries events
across contexts through the broker; locally and in tests every domain runs in
one process, so the relay does the same job: after each commit it replays the
domain's own events into every other domain that has registered them as
external events, inside that domain's context.

Usage (before the domains are initialized):

    install_event_relay(DOMAINS)
"""

import structlog
from protean.core.event_handler import BaseEventHandler
from protean.exceptions import ConfigurationError
from protean.utils import Processing
from protean.utils.eventing import Message
from protean.utils.sync_dispatch import dispatch_events_sync

logger = structlog.get_logger(__name__)


class EventRelay(BaseEventHandler):
    """Forwards a domain's own events to the other connected domains."""

    targets = ()

    @classmethod
    def _handle(cls, event):
        # Called by the sync dispatcher after the source UnitOfWork has been
        # popped. Target handlers must open their own outermost UnitOfWork,
        # so no UnitOfWork may wrap this method.
        if getattr(getattr(event, "meta_", None), "part_of", None) is None:
            # External events arriving here were relayed by their own domain.
            return

        message = Message.from_domain_object(event)
        for domain in cls.targets:
            with domain.domain_context():
                try:
                    relayed = message.to_domain_object()
                except ConfigurationError:
                    continue

                logger.debug(
                    "Relaying event",
                    event_type=message.metadata.headers.type,
                    target=domain.name,
                )
                dispatch_events_sync([relayed], domain.handlers_for)


def _relays(domain) -> list:
    return [record.cls for record in domain.registry.event_handlers.values() if issubclass(record.cls, EventRelay)]


def install_event_relay(domains) -> None:
    """Connect every synchronously processing domain to all the others.

    Calling it again reconnects relays that were already registered.
    """
    domains = tuple(domains)
    for domain in domains:
        if domain.config["event_processing"] != Processing.SYNC.value:
            continue

        targets = tuple(other for other in domains if other is not domain)
        relays = _relays(domain)
        if relays:
            for relay_cls in relays:
                relay_cls.targets = targets
            continue

        relay_cls = type(f"{domain.camel_case_name}EventRelay", (EventRelay,), {"targets": targets})
        domain.event_handler(relay_cls, stream_category="$all")


def disconnect_event_relay(domains) -> None:
    """Stop relaying out of `domains`; the relay classes stay registered but idle."""
    for domain in domains:
        for relay_cls in _relays(domain):
            relay_cls.targets = ()
