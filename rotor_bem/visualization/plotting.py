import numpy as np
import matplotlib.pyplot as plt
from typing import Optional, Sequence, Tuple

from ..core.geometry import Rotor, Section
from ..components.residual import Outputs
from ..analysis.performance import outputs_to_arrays


def plot_spanwise_loads(
    rotor: Rotor,
    sections: Sequence[Section],
    outputs: Sequence[Outputs],
    rotor_name: str = "Rotor",
    figsize: Tuple[int, int] = (10, 7),
    save_path: Optional[str] = None
) -> Tuple[plt.Figure, np.ndarray]:
    """
    Plot spanwise distributions of loads, induction and angles.

    Parameters:
    -----------
    rotor : Rotor
        Rotor used for the solve (radii are shown as r/Rtip)
    sections : sequence of Section
        Sections ordered by increasing radius
    outputs : sequence of Outputs
        Solve result for each section
    rotor_name : str
        Name for plot title
    figsize : tuple
        Figure size
    save_path : str, optional
        Path to save figure

    Returns:
    --------
    fig, axes : Figure and 2x2 array of Axes

    Example:
    --------
    >>> outputs = [solve(rotor, s, op) for s, op in zip(sections, ops)]
    >>> fig, axes = plot_spanwise_loads(rotor, sections, outputs)
    >>> plt.show()
    """
    if len(sections) != len(outputs):
        raise ValueError(f"Got {len(sections)} sections for {len(outputs)} outputs")

    rR = np.array([s.r for s in sections]) / rotor.Rtip
    cols = outputs_to_arrays(outputs)

    fig, axes = plt.subplots(2, 2, figsize=figsize, sharex=True)

    # Loads per unit length
    ax = axes[0, 0]
    ax.plot(rR, cols['Np'], 'o-', label="$N'$ (normal)")
    ax.plot(rR, cols['Tp'], 's-', label="$T'$ (tangential)")
    ax.set_ylabel('Load per unit length [N/m]', fontsize=11)
    ax.legend(loc='best')

    # Induction factors
    ax = axes[0, 1]
    ax.plot(rR, cols['a'], 'o-', label='$a$')
    ax.plot(rR, cols['ap'], 's-', label="$a'$")
    ax.set_ylabel('Induction factor [-]', fontsize=11)
    ax.legend(loc='best')

    # Angles
    ax = axes[1, 0]
    ax.plot(rR, np.degrees(cols['phi']), 'o-', label='$\\phi$')
    ax.plot(rR, np.degrees(cols['alpha']), 's-', label='$\\alpha$')
    ax.set_ylabel('Angle [deg]', fontsize=11)
    ax.set_xlabel('$r/R_{tip}$ [-]', fontsize=11)
    ax.legend(loc='best')

    # Loss factors
    ax = axes[1, 1]
    ax.plot(rR, cols['F'], 'o-', label='$F$')
    ax.plot(rR, cols['G'], 's-', label='$G$')
    ax.set_ylabel('Hub/tip loss factor [-]', fontsize=11)
    ax.set_xlabel('$r/R_{tip}$ [-]', fontsize=11)
    ax.set_ylim(0.0, 1.05)
    ax.legend(loc='best')

    for ax in axes.flat:
        ax.grid(True, alpha=0.3)

    fig.suptitle(f'{rotor_name} - Spanwise Distributions', fontsize=13, fontweight='bold')
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')
        print(f"Figure saved to: {save_path}")

    return fig, axes


def plot_performance_curve(
    x: Sequence[float],
    coefficients: dict,
    xlabel: str = 'Advance ratio, $J$ [-]',
    title: str = "Rotor Performance",
    figsize: Tuple[int, int] = (8, 6),
    save_path: Optional[str] = None
) -> Tuple[plt.Figure, plt.Axes]:
    """
    Plot nondimensional coefficients against an operating parameter.

    Parameters:
    -----------
    x : sequence of float
        Operating parameter (advance ratio, tip-speed ratio, ...)
    coefficients : dict
        Label -> sequence of values, same length as x
    xlabel : str
        Label of the x axis
    title : str
        Plot title
    figsize : tuple
        Figure size
    save_path : str, optional
        Path to save figure

    Returns:
    --------
    fig, ax : Figure and Axes objects
    """
    fig, ax = plt.subplots(figsize=figsize)

    for label, values in coefficients.items():
        ax.plot(x, values, 'o-', label=label)

    ax.set_xlabel(xlabel, fontsize=12)
    ax.set_ylabel('Coefficient [-]', fontsize=12)
    ax.set_title(title, fontsize=13, fontweight='bold')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='best')

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches='tight')
        print(f"Figure saved to: {save_path}")

    return fig, ax
