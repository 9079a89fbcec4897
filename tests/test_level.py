from clickpath.actor import Actor
from clickpath.level import Level


class RecordingActor(Actor):
    def __init__(self):
        super().__init__()
        self.updates = []
        self.draws = 0

    def update(self, delta_time):
        self.updates.append(delta_time)

    def draw(self):
        self.draws += 1


def test_added_actor_waits_until_processed():
    level = Level()
    actor = RecordingActor()
    level.add_actor(actor)
    assert level.actors == []
    level.process_added_and_destroyed_actors()
    assert level.actors == [actor]


def test_processing_keeps_add_order():
    level = Level()
    actors = [RecordingActor() for _ in range(3)]
    for actor in actors:
        level.add_actor(actor)
    level.process_added_and_destroyed_actors()
    assert level.actors == actors


def test_pending_list_is_cleared():
    level = Level()
    actor = RecordingActor()
    level.add_actor(actor)
    level.process_added_and_destroyed_actors()
    level.process_added_and_destroyed_actors()
    assert level.actors == [actor]


def test_destroyed_actor_removed():
    level = Level()
    keep, drop = RecordingActor(), RecordingActor()
    level.add_actor(keep)
    level.add_actor(drop)
    level.process_added_and_destroyed_actors()
    drop.destroy()
    level.process_added_and_destroyed_actors()
    assert level.actors == [keep]


def test_update_passes_delta_to_active_only():
    level = Level()
    active, inactive, expired = RecordingActor(), RecordingActor(), RecordingActor()
    for actor in (active, inactive, expired):
        level.add_actor(actor)
    level.process_added_and_destroyed_actors()
    inactive.set_active(False)
    expired.destroy()
    level.update(0.25)
    assert active.updates == [0.25]
    assert inactive.updates == []
    assert expired.updates == []
    assert level.actors == [active, inactive, expired]
    level.process_added_and_destroyed_actors()
    assert level.actors == [active, inactive]


def test_draw_skips_inactive():
    level = Level()
    active, inactive = RecordingActor(), RecordingActor()
    level.add_actor(active)
    level.add_actor(inactive)
    level.process_added_and_destroyed_actors()
    inactive.set_active(False)
    level.draw()
    level.draw()
    assert active.draws == 2
    assert inactive.draws == 0


def test_pending_actor_not_updated():
    level = Level()
    actor = RecordingActor()
    level.add_actor(actor)
    level.update(1.0)
    assert actor.updates == []