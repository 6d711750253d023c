"""Create-or-update reconciliation of observable nodes and their labels."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from seal_isac.domain.model import ObservableCreate, RelationshipType
from seal_isac.domain.stix import MARKING_TLP_CLEAR, label_id, observable_id

if TYPE_CHECKING:
    from collections.abc import Iterable

    from seal_isac.domain.model import Observable, WebContent
    from seal_isac.domain.ports import ThreatIntelStore

log = getLogger(__name__)


@dataclass(slots=True)
class ObservableReconciler:
    store: ThreatIntelStore

    async def reconcile(
        self,
        content: WebContent,
        *,
        creator: str | None = None,
        add_labels: Iterable[str] = (),
        remove_labels: Iterable[str] = (),
        derive_relationships: bool = True,
    ) -> Observable:
        """Converge the observable for ``content`` onto the requested label changes.

        A missing observable is created with ``add_labels`` as its initial labels
        (``remove_labels`` is moot then). ``derive_relationships`` controls whether a
        freshly created http(s) URL also gets its host domain linked.
        """

        existing = await self.store.get_observable(observable_id(content))
        if existing is not None:
            return await self.update(existing, add_labels=add_labels, remove_labels=remove_labels)
        return await self._create(
            content,
            creator=creator,
            labels=tuple(add_labels),
            derive_relationships=derive_relationships,
        )

    async def update(
        self,
        observable: Observable,
        *,
        add_labels: Iterable[str] = (),
        remove_labels: Iterable[str] = (),
    ) -> Observable:
        for label in add_labels:
            if not observable.has_label(label):
                log.debug("Adding label %r to %s", label, observable.id)
                observable.labels = await self.store.add_label(observable.id, label_id(label))
        for label in remove_labels:
            if observable.has_label(label):
                log.debug("Removing label %r from %s", label, observable.id)
                observable.labels = await self.store.delete_label(observable.id, label_id(label))
        return observable

    async def _create(
        self,
        content: WebContent,
        *,
        creator: str | None,
        labels: tuple[str, ...],
        derive_relationships: bool,
    ) -> Observable:
        observable = await self.store.create_observable(
            ObservableCreate(
                content=content,
                labels=labels,
                created_by=creator,
                markings=(MARKING_TLP_CLEAR,),
            )
        )
        log.info("Created observable %s for %s", observable.id, content)

        host = content.host_domain() if derive_relationships else None
        if host is not None:
            # depth bound 1: the host domain never derives further relationships
            domain = await self.reconcile(host, creator=creator, derive_relationships=False)
            await self.store.create_relationship(
                observable.id, domain.id, RelationshipType.RELATED_TO
            )
            log.info("Linked %s to host domain %s", content, host.value)

        return observable
