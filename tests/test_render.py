import pytest

from grassdoom.game import Game, Player
from grassdoom.render import (
    TEXTURE_SIZE,
    Renderer,
    blue,
    generate_textures,
    green,
    red,
    rgb,
    shade,
)
from grassdoom.trig import PI, TrigTables

WIDTH = 40
HEIGHT = 30


@pytest.fixture(scope="module")
def tables():
    return TrigTables()


@pytest.fixture
def renderer(tables):
    return Renderer(Game(tables), WIDTH, HEIGHT)


def _wall_colors():
    wall, _ = generate_textures()
    colors = set(wall)
    return colors | {shade(c, 0.7) for c in colors}


def test_rgb_layout():
    assert rgb(1, 2, 3) == 0x030201


@pytest.mark.parametrize("r, g, b", [(0, 0, 0), (255, 255, 255), (12, 200, 7)])
def test_channel_round_trip(r, g, b):
    color = rgb(r, g, b)
    assert (red(color), green(color), blue(color)) == (r, g, b)


def test_shade_identity_and_zero():
    color = rgb(180, 80, 60)
    assert shade(color, 1.0) == color
    assert shade(color, 0.0) == 0


def test_shade_truncates():
    assert shade(rgb(3, 3, 3), 0.5) == rgb(1, 1, 1)


def test_texture_sizes():
    wall, floor = generate_textures()
    assert len(wall) == TEXTURE_SIZE * TEXTURE_SIZE
    assert len(floor) == TEXTURE_SIZE * TEXTURE_SIZE


def test_wall_texture_pattern():
    wall, _ = generate_textures()
    assert wall[0] == rgb(180, 80, 60)
    assert wall[14] == rgb(100, 100, 100)
    assert wall[15] == rgb(80, 80, 100)
    assert wall[14 * TEXTURE_SIZE] == rgb(100, 100, 100)


def test_floor_texture_pattern():
    _, floor = generate_textures()
    assert floor[0] == rgb(120, 120, 170)
    assert floor[16] == rgb(100, 100, 150)
    assert floor[16 * TEXTURE_SIZE + 16] == floor[0]


def test_precompute_rays_invariants(renderer):
    rays = renderer.precompute_rays()
    assert len(rays) == WIDTH
    for ray in rays:
        assert ray.step_x == (-1 if ray.dir_x < 0 else 1)
        assert ray.step_y == (-1 if ray.dir_y < 0 else 1)
        if ray.dir_x != 0:
            assert ray.delta_dist_x * abs(ray.dir_x) == pytest.approx(1.0)
        if ray.dir_y != 0:
            assert ray.delta_dist_y * abs(ray.dir_y) == pytest.approx(1.0)


def test_rays_face_forward_at_angle_zero(renderer):
    assert all(ray.step_x == 1 for ray in renderer.precompute_rays())


def test_render_buffer_size_and_sky(renderer):
    buffer = renderer.render()
    assert len(buffer) == WIDTH * HEIGHT
    assert buffer[:WIDTH] == [rgb(100, 150, 255)] * WIDTH


def test_bottom_row_is_floor(renderer):
    buffer = renderer.render()
    for color in buffer[(HEIGHT - 1) * WIDTH :]:
        assert red(color) == green(color)
        assert blue(color) > red(color)


def test_center_shows_wall(renderer):
    buffer = renderer.render()
    assert buffer[(HEIGHT // 2) * WIDTH + WIDTH // 2] in _wall_colors()


def test_close_wall_fills_column(tables):
    game = Game(tables)
    game.player = Player(1.05, 3.5, PI)
    buffer = Renderer(game, WIDTH, HEIGHT).render()
    assert buffer[WIDTH // 2] in _wall_colors()


def test_render_is_deterministic(renderer):
    first = list(renderer.render())
    assert renderer.render() == first