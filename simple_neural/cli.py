"""
Console of the net : train from a data file, test a saved net, test a random net.
"""

import click
from colorama import Fore, Style
from tqdm import tqdm

from .display import (
    LOG_FILE_NAME,
    append_log,
    plot_cost,
    show_connections,
    show_error,
    show_vector_vals,
    show_vector_vals_rounded,
)
from .errors import NetError
from .net import ALPHA, ETA, Hyperparameters, Net
from .persistence import SAVE_FILE_NAME, load_net, save_net
from .training_data import TrainingData, generate_xor_data


data_option = click.option(
    "--data", "data_path", default="trainingData.txt", show_default=True,
    type=click.Path(exists=True, dir_okay=False), help="Training data file, its first record gives the topology.")
weights_option = click.option(
    "--weights", "weights_path", default=SAVE_FILE_NAME, show_default=True,
    type=click.Path(dir_okay=False), help="Saved net file.")


def read_topology(data_path):
    return TrainingData(data_path).get_topology()


def train_net(net, data_path, epochs=1, verbose=True, log_path=None):
    """
    Run every sample of the data file through the net, epochs times.
    Return the recent average error after each pass.
    """
    history = []
    training_pass = 0
    for epoch in range(epochs):
        samples = TrainingData(data_path)
        samples.get_topology()
        if not verbose:
            samples = tqdm(samples, desc=f"epoch {epoch + 1}/{epochs}")

        for inputs, targets in samples:
            training_pass += 1
            net.forward(inputs)
            results = net.results()
            net.backward(targets)
            history.append(net.recent_average_error)

            if verbose:
                print( f"\nPass {training_pass}" )
                show_vector_vals(": Inputs:", inputs)
                show_vector_vals(": Outputs:", results)
                show_vector_vals("Targets:", targets)
                show_error("net recent average error:", net.recent_average_error)

        if log_path is not None:
            append_log(f"[Epoch] : {epoch + 1} [Passes] : {training_pass} "
                       f"[ERROR] : {net.recent_average_error:.6f}", log_path)
    return history


def test_loop(net):
    width = net.topology[0]
    another_test = True
    while another_test:
        inputs = [ click.prompt(f"input {i}", type=float) for i in range(width) ]

        show_vector_vals(": Inputs:", inputs)
        net.forward(inputs)
        show_vector_vals_rounded(": Outputs:", net.results())

        another_test = click.confirm("Another test?", default=True)


@click.group()
@click.version_option(package_name="simple-neural")
def main():
    """Feedforward neural net trained by backpropagation with momentum."""


@main.command()
@data_option
@weights_option
@click.option("--save/--no-save", default=None, help="Save the net after training, asked when not given.")
@click.option("--epochs", default=1, show_default=True, type=click.IntRange(min=1))
@click.option("--quiet", is_flag=True, help="Progress bar instead of the per pass report.")
@click.option("--log", "log_path", default=None, type=click.Path(dir_okay=False),
              help=f"Append a line per epoch to this file (e.g. {LOG_FILE_NAME}).")
@click.option("--plot", "plot_path", default=None, type=click.Path(dir_okay=False),
              help="Save the recent average error curve to this image.")
@click.option("--eta", default=ETA, show_default=True, type=float, help="Learning rate.")
@click.option("--alpha", default=ALPHA, show_default=True, type=float, help="Momentum.")
@click.option("--seed", default=None, type=int, help="Seed of the initial random weights.")
def train(data_path, weights_path, save, epochs, quiet, log_path, plot_path, eta, alpha, seed):
    """Train a new net on the samples of the data file."""
    try:
        net = Net(read_topology(data_path), Hyperparameters(eta=eta, alpha=alpha), seed=seed)
        history = train_net(net, data_path, epochs=epochs, verbose=not quiet, log_path=log_path)
    except NetError as e:
        raise click.ClickException(str(e)) from e

    print( Style.BRIGHT + f"\nDone : {len(history)} passes, "
           f"net recent average error : {net.recent_average_error:.6f}" + Style.RESET_ALL )

    if plot_path is not None:
        plot_cost(history, plot_path)

    if save is None:
        save = click.confirm("Save Net?", default=False)
    if save:
        try:
            save_net(net, weights_path)
        except OSError as e:
            raise click.ClickException(f"cannot write {weights_path} : {e}") from e
        print( Fore.GREEN + f"Net saved into {weights_path}" + Style.RESET_ALL )


@main.command()
@data_option
@weights_option
@click.option("--show-weights", is_flag=True, help="Print every connection weight once loaded.")
def test(data_path, weights_path, show_weights):
    """Test a saved net with inputs typed on stdin."""
    try:
        net = load_net(Net(read_topology(data_path)), weights_path)
    except OSError as e:
        raise click.ClickException(f"cannot read {weights_path} : {e}") from e
    except NetError as e:
        raise click.ClickException(str(e)) from e

    if show_weights:
        show_connections(net)
    test_loop(net)


@main.command("test-random")
@data_option
@click.option("--seed", default=None, type=int, help="Seed of the random weights.")
def test_random(data_path, seed):
    """Test an untrained net with random weights."""
    try:
        net = Net(read_topology(data_path), seed=seed)
    except NetError as e:
        raise click.ClickException(str(e)) from e
    test_loop(net)


@main.command()
@click.option("--output", "output_path", default="trainingData.txt", show_default=True,
              type=click.Path(dir_okay=False))
@click.option("--samples", default=2000, show_default=True, type=click.IntRange(min=1))
@click.option("--seed", default=None, type=int)
def generate(output_path, samples, seed):
    """Write an XOR training data file."""
    generate_xor_data(output_path, samples, seed=seed)
    print( f"{samples} XOR samples written into {output_path}" )


if __name__ == "__main__":
    main()
