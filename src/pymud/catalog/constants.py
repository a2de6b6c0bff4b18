"""CODATA 2018 physical constants as deferred expressions.

Values are exact decimal strings so each field backend parses them at its
own precision.
"""

from __future__ import annotations

from pymud.catalog.units import (
    COULOMB,
    FARAD,
    HENRY,
    HERTZ,
    JOULE,
    KELVIN,
    KILOGRAM,
    METER,
    METER_PER_SECOND,
    MOLE,
    OHM,
    SECOND,
    SQUARE_METER,
)
from pymud.expr.expression import take
from pymud.units.unit import UNITLESS, new_unit

pi = "3.141592653589793238462643383279"
euler = "2.718281828459045235360287471352"

c = take("299792458", METER_PER_SECOND)
h = take("6.62607015E-34", new_unit().as_(JOULE).multiply(SECOND).create())
h_bar = h.divide(2).divide(pi)
G = take("6.67430E-11", new_unit().as_(METER, 3).divide(KILOGRAM).divide(SECOND, 2).create())
eps_0 = take("8.8541878128E-12", new_unit().as_(FARAD).divide(METER).create())
mu_0 = take("1.25663706212E-6", new_unit().as_(HENRY).divide(METER).create())
Z_0 = take("376.730313668", OHM)
e = take("1.602176634E-19", COULOMB)
Dnu_Cs = take("9192631770", HERTZ)
N_A = take("6.02214076E23", new_unit().as_(MOLE, -1).create())
k_B = take("1.380649E-23", new_unit().as_(JOULE).divide(KELVIN).create())
K_J = take(2).multiply(e).divide(h)
G_0 = K_J.multiply(e)
R_K = take(2).divide(G_0)

m_e = take("9.1093837015E-31", KILOGRAM)
m_p = take("1.67262192369E-27", KILOGRAM)
m_u = take("1.66053906660E-27", KILOGRAM)
m_n = take("1.67492749804E-27", KILOGRAM)
_e_h_bar_over_2 = e.multiply(h_bar).divide(2)
mu_B = _e_h_bar_over_2.divide(m_e)
mu_N = _e_h_bar_over_2.divide(m_p)

alpha = take("7.2973525693E-3", UNITLESS)
a_0 = take("5.29177210903E-11", METER)
r_e = take("2.8179403262E-15", METER)
g_e = take("-2.00231930436256", UNITLESS)
E_h = take("4.3597447222071E-18", JOULE)
R_inf = take("10973731.568160", new_unit().as_(METER, -1).create())
sigma_e = take("6.6524587321E-29", SQUARE_METER)

F = N_A.multiply(e)
R = N_A.multiply(k_B)
M_u = take("0.99999999965E-3", new_unit().as_(KILOGRAM).divide(MOLE).create())
sigma = (
    take(pi)
    .multiply(pi)
    .multiply(k_B)
    .multiply(k_B)
    .multiply(k_B)
    .multiply(k_B)
    .divide(take(60).multiply(h_bar).multiply(h_bar).multiply(h_bar).multiply(c).multiply(c))
)


__all__ = [
    "E_h",
    "Dnu_Cs",
    "F",
    "G",
    "G_0",
    "K_J",
    "M_u",
    "N_A",
    "R",
    "R_K",
    "R_inf",
    "Z_0",
    "a_0",
    "alpha",
    "c",
    "e",
    "eps_0",
    "euler",
    "g_e",
    "h",
    "h_bar",
    "k_B",
    "m_e",
    "m_n",
    "m_p",
    "m_u",
    "mu_0",
    "mu_B",
    "mu_N",
    "pi",
    "r_e",
    "sigma",
    "sigma_e",
]
