import pytest

from simple_neural.errors import LengthMismatch, PersistenceFormatError
from simple_neural.net import Net
from simple_neural.persistence import load_net, read_weights, save_net


def trained_net(seed=21):
    net = Net([2, 3, 2], seed=seed)
    for inputs, targets in [([0.0, 1.0], [1.0, -1.0]), ([1.0, 0.0], [-1.0, 1.0])] * 20:
        net.forward(inputs)
        net.backward(targets)
    return net


def test_save_writes_one_pair_per_connection(tmp_path):
    net = trained_net()
    path = tmp_path / "savedData.txt"
    save_net(net, path)

    lines = path.read_text().splitlines()
    assert len(lines) == net.num_connections()
    assert all(len(line.split()) == 2 for line in lines)


def test_save_load_round_trip(tmp_path):
    net = trained_net()
    path = tmp_path / "savedData.txt"
    save_net(net, path)

    loaded = load_net(Net([2, 3, 2], seed=0), path)

    assert loaded.flatten_weights() == net.flatten_weights()
    for inputs in ([0.25, -0.5], [1.0, 1.0], [0.0, 0.0]):
        net.forward(inputs)
        loaded.forward(inputs)
        assert loaded.results() == net.results()


def test_velocities_are_restored(tmp_path):
    net = trained_net()
    path = tmp_path / "savedData.txt"
    save_net(net, path)

    loaded = load_net(Net([2, 3, 2], seed=0), path)
    assert loaded.flatten_weights()[1::2] == net.flatten_weights()[1::2]
    assert any(v != 0.0 for v in loaded.flatten_weights()[1::2])


def test_truncated_file_is_rejected(tmp_path):
    path = tmp_path / "savedData.txt"
    save_net(trained_net(), path)
    lines = path.read_text().splitlines()
    path.write_text("\n".join(lines[:-3]) + "\n")

    net = Net([2, 3, 2], seed=0)
    before = net.flatten_weights()
    with pytest.raises(LengthMismatch):
        load_net(net, path)
    assert net.flatten_weights() == before


def test_other_topology_is_rejected(tmp_path):
    path = tmp_path / "savedData.txt"
    save_net(trained_net(), path)
    with pytest.raises(LengthMismatch):
        load_net(Net([2, 4, 2]), path)


@pytest.mark.parametrize("content", ["0.5 0.1\n0.2 nan?\n", "0.5 0.1 0.3\n", "0.5\n", "weight velocity\n"])
def test_malformed_lines(tmp_path, content):
    path = tmp_path / "savedData.txt"
    path.write_text(content)
    with pytest.raises(PersistenceFormatError):
        read_weights(path)


def test_blank_lines_are_ignored(tmp_path):
    path = tmp_path / "savedData.txt"
    path.write_text("0.5 0.1\n\n-0.25 0.0\n\n")
    assert read_weights(path) == [0.5, 0.1, -0.25, 0.0]
