import random

from flappy_bird.config import LIFT
from flappy_bird.entities import Pipe
from flappy_bird.state import Command, GameMode, GameStateMachine, Session
from flappy_bird.storage import MemoryScoreStore


class ExplodingStore:
    def load(self) -> int:
        raise OSError("no storage")

    def save(self, value: int) -> None:
        raise OSError("no storage")


def make_machine(best: int = 0, seed: int = 0) -> GameStateMachine:
    return GameStateMachine(MemoryScoreStore(best), Session(400, 600, rng=random.Random(seed)))


def run_until_over(machine: GameStateMachine, limit: int = 1000) -> int:
    for n in range(1, limit + 1):
        machine.tick()
        if machine.mode is GameMode.OVER:
            return n
    raise AssertionError("game never ended")


def test_initial_state() -> None:
    m = make_machine(best=7)
    assert m.mode is GameMode.NOT_STARTED
    assert m.session.score == 0
    assert m.session.best == 7


def test_tick_before_start_changes_nothing() -> None:
    m = make_machine()
    y = m.session.bird.y
    for _ in range(200):
        m.tick()
    assert m.session.bird.y == y
    assert m.session.frame == 0
    assert len(m.session.obstacles) == 0


def test_flap_ignored_before_start() -> None:
    m = make_machine()
    assert m.handle_command(Command.FLAP) is False
    assert m.session.bird.velocity == 0.0
    assert m.mode is GameMode.NOT_STARTED


def test_start_enters_running() -> None:
    m = make_machine()
    assert m.handle_command(Command.START) is True
    assert m.mode is GameMode.RUNNING
    assert m.session.frame == 0
    m.tick()
    assert m.session.frame == 1
    assert m.session.bird.y > 300


def test_start_and_restart_ignored_while_running() -> None:
    m = make_machine()
    m.handle_command(Command.START)
    m.tick()
    assert m.handle_command(Command.START) is False
    assert m.handle_command(Command.RESTART) is False
    assert m.session.frame == 1


def test_flap_while_running() -> None:
    m = make_machine()
    m.handle_command(Command.START)
    m.tick()
    assert m.handle_command(Command.FLAP) is True
    assert m.session.bird.velocity == LIFT


def test_falling_bird_hits_ground() -> None:
    m = make_machine()
    m.handle_command(Command.START)
    # 300 + 0.6 * n(n+1)/2 reaches the floor at n = 30
    assert run_until_over(m) == 30
    assert m.session.bird.y == 600 - m.session.bird.height


def test_ticks_after_game_over_change_nothing() -> None:
    m = make_machine()
    m.handle_command(Command.START)
    run_until_over(m)
    frame, y = m.session.frame, m.session.bird.y
    m.tick()
    assert m.session.frame == frame
    assert m.session.bird.y == y


def test_flap_ignored_when_over() -> None:
    m = make_machine()
    m.handle_command(Command.START)
    run_until_over(m)
    velocity = m.session.bird.velocity
    assert m.handle_command(Command.FLAP) is False
    assert m.session.bird.velocity == velocity
    assert m.handle_command(Command.START) is False
    assert m.mode is GameMode.OVER


def test_restart_after_collision_resets_session() -> None:
    m = make_machine()
    m.handle_command(Command.START)
    m.session.obstacles.pipes.append(Pipe(200, 100))
    m.session.score = 4
    run_until_over(m)
    assert m.handle_command(Command.RESTART) is True
    assert m.mode is GameMode.RUNNING
    assert m.session.frame == 0
    assert m.session.score == 0
    assert len(m.session.obstacles) == 0
    assert m.session.bird.y == 300
    assert m.session.bird.velocity == 0.0
    assert m.session.best == 4


def test_submitted_commands_apply_at_next_tick() -> None:
    m = make_machine()
    m.submit(Command.START)
    assert m.mode is GameMode.NOT_STARTED
    m.tick()
    assert m.mode is GameMode.RUNNING
    assert m.session.frame == 1


def test_collision_wins_over_pending_flap() -> None:
    m = make_machine()
    m.handle_command(Command.START)
    m.session.bird.y = 100
    m.session.obstacles.pipes.append(Pipe(80, 300))
    m.submit(Command.FLAP)
    m.tick()
    assert m.session.bird.velocity == LIFT + m.session.bird.gravity
    assert m.mode is GameMode.OVER


def test_passing_a_pipe_updates_best_and_store() -> None:
    store = MemoryScoreStore(0)
    m = GameStateMachine(store, Session(400, 600, rng=random.Random(1)))
    m.handle_command(Command.START)
    m.session.obstacles.pipes.append(Pipe(30, 200))
    m.tick()
    assert m.mode is GameMode.RUNNING
    assert m.session.score == 1
    assert m.session.best == 1
    assert store.saves == [1]


def test_store_failures_never_reach_the_game() -> None:
    m = GameStateMachine(ExplodingStore(), Session(400, 600, rng=random.Random(2)))
    assert m.session.best == 0
    m.handle_command(Command.START)
    m.session.obstacles.pipes.append(Pipe(30, 200))
    m.tick()
    assert m.session.best == 1


def test_score_and_best_invariants_over_many_sessions() -> None:
    """Score only drops on (re)start; best is the running max and is saved exactly when it rises."""
    rng = random.Random(11)
    store = MemoryScoreStore(0)
    m = GameStateMachine(store, Session(400, 600, rng=random.Random(12)))
    m.handle_command(Command.START)
    last_score = 0
    highest = 0
    for _ in range(20000):
        bird = m.session.bird
        pipes = [p for p in m.session.obstacles if p.right >= bird.x]
        if pipes:
            target = pipes[0].top + pipes[0].gap - bird.height - 20
            if bird.y > target and rng.random() < 0.5:
                m.submit(Command.FLAP)
        elif bird.y > 350:
            m.submit(Command.FLAP)
        m.tick()
        assert m.session.score >= last_score
        assert 0 <= bird.y <= 600 - bird.height
        last_score = m.session.score
        highest = max(highest, m.session.score)
        assert m.session.best == highest
        if m.mode is GameMode.OVER:
            m.submit(Command.RESTART)
            m.tick()
            assert m.session.score == 0
            last_score = 0
    assert store.saves == list(range(1, highest + 1))


def test_primary_presses_resolve_when_applied() -> None:
    """Two presses queued before one tick start the game and then flap."""
    m = make_machine()
    m.submit(Command.PRIMARY)
    m.submit(Command.PRIMARY)
    m.tick()
    assert m.mode is GameMode.RUNNING
    assert m.session.bird.velocity == LIFT + m.session.bird.gravity


def test_primary_restarts_after_game_over() -> None:
    m = make_machine()
    m.handle_command(Command.START)
    run_until_over(m)
    assert m.handle_command(Command.PRIMARY) is True
    assert m.mode is GameMode.RUNNING
    assert m.session.frame == 0
