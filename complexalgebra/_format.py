"""Canonical text form shared by all three complex types."""

__all__ = ['format_complex']


def format_complex(real, imag, render):
    """
    Render `real + imag*i`.  `render` turns one component into text; the
    comparisons below work for int, Fraction and float components alike.
    Unit imaginary parts are written as a bare `i`.
    """
    if imag == 0:
        return "0" if real == 0 else render(real)
    if imag == 1:
        unit = "i"
    elif imag == -1:
        unit = "-i"
    else:
        unit = render(imag) + "i"
    if real == 0:
        return unit
    if imag == -1 or imag < 0:
        # The sign is already part of the rendered imaginary part.
        return render(real) + unit
    return render(real) + "+" + unit
