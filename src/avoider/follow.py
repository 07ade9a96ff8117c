"""Follow mode: the cat's top-left corner sits exactly on the cursor."""

from __future__ import annotations

from avoider.geometry import PointerState
from avoider.session import Session


class FollowEngine:
    name = "follow"

    def start(self, session: Session) -> Session:
        # Drawn at the pointer origin until the first motion event
        return self.update(session)

    def update(self, session: Session) -> Session:
        p = session.pointer
        if (session.sprite.x, session.sprite.y) == (p.x, p.y):
            return session
        return session.with_sprite(session.sprite.at(x=p.x, y=p.y))

    def on_pointer_moved(
        self, session: Session, pointer: PointerState, previous: PointerState
    ) -> Session:
        return self.update(session.with_pointer(pointer, previous))
