"""
Console output of the training / test loops.
"""

import time

import matplotlib.pyplot as plt
from colorama import Fore, Style
from numpy import arange


LOG_FILE_NAME = "LOG_training.txt"


def format_vector(values, rounded=False):
    if rounded:
        return " ".join( f"{v:.1f}" for v in values )
    return " ".join( f"{v:g}" for v in values )


def show_vector_vals(label, values):
    print( f"{label} {format_vector(values)}" )


def show_vector_vals_rounded(label, values):
    print( Fore.GREEN + f"{label} {format_vector(values, rounded=True)}" + Style.RESET_ALL )


def show_error(label, error):
    print( Fore.YELLOW + f"{label} {error:.6f}" + Style.RESET_ALL )


def show_connections(net):
    print( Style.BRIGHT + Fore.CYAN + f">>>>> CONNECTIONS OF {net} " + Style.RESET_ALL )
    for l, layer in enumerate(net.layers[:-1]):
        for n, neuron in enumerate(layer):
            for c, conn in enumerate(neuron.connections):
                print( f"layer {l} neuron {n:3d} -> {c:3d} : {conn.weight:.6f}" )


def append_log(message, path=LOG_FILE_NAME):
    f = open(path, "a")
    f.write( f"{time.strftime('%Y-%m-%d %H:%M:%S')} - {message}\n" )
    f.close()


def plot_cost(errors, path=None):
    """
    Plot the recent average error of every training pass,
    saved into path if given, shown otherwise.
    """
    fig = plt.figure("COST")
    plt.plot( arange( 1, len(errors) + 1 ), errors, label="recent average error" )
    plt.xlabel("pass")
    plt.legend()
    if path is not None:
        fig.savefig(path)
        plt.close(fig)
    else:
        plt.show()
