import pytest

from primordia.core.random import RandomSource
from primordia.items import Item, PhysicalForm, PhysicalItem, PhysicalMaterial
from primordia.minigames import BallBreakerMinigame
from primordia.minigames.ball_breaker import (
    Block,
    random_resource,
    resource_damage,
    resource_is_valid,
    resource_toughness,
)

M = PhysicalMaterial


def test_level_zero_board_is_all_mud_and_draws_nothing():
    rng = RandomSource(1)
    board = BallBreakerMinigame.new(0, rng)
    assert (board.blocks_per_row, board.blocks_per_column) == (10, 10)
    assert len(board.blocks) == 10 * 7
    assert {b.material for b in board.blocks.values()} == {M.MUD}
    assert min(y for _, y in board.blocks) == 3
    assert rng.next() == RandomSource(1).next()


def test_board_roll_is_deterministic():
    a = BallBreakerMinigame.new(5, RandomSource(11))
    b = BallBreakerMinigame.new(5, RandomSource(11))
    assert a.blocks == b.blocks
    assert 10 <= a.blocks_per_row < 15
    assert a.blocks_per_row == a.blocks_per_column


def test_resource_tables():
    assert resource_is_valid(M.IRON)
    assert not resource_is_valid(M.APPLE)
    assert resource_toughness(M.MUD) == 1
    assert resource_damage(M.IRON) == 10
    assert resource_toughness(M.UNOBTAINIUM) == 16
    assert random_resource(0, RandomSource(1)) is M.MUD
    assert random_resource(50, RandomSource(1)) in set(M)


def test_ingest_launches_ball_from_one_unit():
    board = BallBreakerMinigame.new(0, RandomSource(1))
    assert board.ingest_item(Item.physical(PhysicalForm.LUMP, M.MUD, 3.0)) == 1.0
    assert board.ingest_item(Item.physical(PhysicalForm.LUMP, M.MUD, 0.5)) == 0.0
    assert board.ingest_item(Item.physical(PhysicalForm.OBJECT, M.APPLE)) == 0.0
    assert len(board.balls) == 1


def test_mud_on_mud_breaks_both():
    board = BallBreakerMinigame.new(0, RandomSource(1))
    ball = board.launch_ball(M.MUD)
    outcome = board.collide(ball, (0, 3))
    assert outcome.block_broken and outcome.ball_broken
    assert [i.type for i in outcome.emitted] == [
        PhysicalItem(PhysicalForm.BLOCK, M.MUD),
        PhysicalItem(PhysicalForm.BALL, M.MUD),
    ]
    assert (0, 3) not in board.blocks
    assert ball not in board.balls


def test_hard_ball_survives_soft_block_and_bounces_off_hard_block():
    board = BallBreakerMinigame.new(0, RandomSource(1))
    ball = board.launch_ball(M.IRON)
    outcome = board.collide(ball, (1, 3))
    assert outcome.block_broken and not outcome.ball_broken
    board.blocks[(2, 3)] = Block(M.DIAMOND)
    weak = board.launch_ball(M.DIRT)
    outcome = board.collide(weak, (2, 3))
    assert not outcome.block_broken
    assert outcome.ball_broken  # diamond damage 11 >= dirt toughness 2
    assert (2, 3) in board.blocks


def test_unknown_collision_is_ignored():
    board = BallBreakerMinigame.new(0, RandomSource(1))
    outcome = board.collide(42, (0, 0))
    assert not outcome.block_broken and not outcome.ball_broken


def test_clearing_the_board_levels_up_with_new_roll():
    board = BallBreakerMinigame.new(0, RandomSource(1))
    board.blocks.clear()
    assert board.is_cleared()
    assert board.should_level_up()
    with pytest.raises(ValueError):
        board.levelup()
    nxt = board.levelup(RandomSource(2))
    assert nxt.level == 1
    assert len(nxt.blocks) == nxt.blocks_per_row * (nxt.blocks_per_column - 3)


def test_spawn_has_blocks_and_paddle():
    board = BallBreakerMinigame.new(0, RandomSource(1))
    roles = [p.role for p in board.spawn().parts]
    assert roles.count("block") == 70
    assert roles[-1] == "paddle"
