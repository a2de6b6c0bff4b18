"""SI, common non-SI and US customary units, plus the metric prefixes.

Every unit here is built through the public builder; nothing in this module
has access to anything a user of the library does not.
"""

from __future__ import annotations

from pymud.algebra.exponent import CUBED, SQUARED
from pymud.catalog import dimensions as dims
from pymud.expr.scalar import PI
from pymud.units.unit import UNITLESS, Unit, new_unit
from pymud.units.universe import AMPERE, CANDELA, KELVIN, KILOGRAM, METER, MOLE, SECOND

YOTTA = "1000000000000000000000000"
ZETTA = "1000000000000000000000"
EXA = "1000000000000000000"
PETA = "1000000000000000"
TERA = "1000000000000"
GIGA = "1000000000"
MEGA = "1000000"
KILO = "1000"
HECTO = "100"
DECA = "10"
DECI = "0.1"
CENTI = "0.01"
MILLI = "0.001"
MICRO = "0.000001"
NANO = "0.000000001"
PICO = "0.000000000001"
FEMTO = "0.000000000000001"
ATTO = "0.000000000000000001"
ZEPTO = "0.000000000000000000001"
YOCTO = "0.000000000000000000000001"


def _prefixed(unit: Unit, factor: str, name: str, symbol: str) -> Unit:
    return (
        new_unit()
        .of_dimension(unit.dimension)
        .as_exactly(factor)
        .of_a(unit)
        .with_name(name + unit.name)
        .with_symbol(symbol + unit.symbol)
        .create()
    )


def yotta(unit: Unit) -> Unit:
    return _prefixed(unit, YOTTA, "YOTTA", "Y")


def zetta(unit: Unit) -> Unit:
    return _prefixed(unit, ZETTA, "ZETTA", "Z")


def exa(unit: Unit) -> Unit:
    return _prefixed(unit, EXA, "EXA", "E")


def peta(unit: Unit) -> Unit:
    return _prefixed(unit, PETA, "PETA", "P")


def tera(unit: Unit) -> Unit:
    return _prefixed(unit, TERA, "TERA", "T")


def giga(unit: Unit) -> Unit:
    return _prefixed(unit, GIGA, "GIGA", "G")


def mega(unit: Unit) -> Unit:
    return _prefixed(unit, MEGA, "MEGA", "M")


def kilo(unit: Unit) -> Unit:
    return _prefixed(unit, KILO, "KILO", "k")


def hecto(unit: Unit) -> Unit:
    return _prefixed(unit, HECTO, "HECTO", "h")


def deca(unit: Unit) -> Unit:
    return _prefixed(unit, DECA, "DECA", "da")


def deci(unit: Unit) -> Unit:
    return _prefixed(unit, DECI, "DECI", "d")


def centi(unit: Unit) -> Unit:
    return _prefixed(unit, CENTI, "CENTI", "c")


def milli(unit: Unit) -> Unit:
    return _prefixed(unit, MILLI, "MILLI", "m")


def micro(unit: Unit) -> Unit:
    return _prefixed(unit, MICRO, "MICRO", "μ")


def nano(unit: Unit) -> Unit:
    return _prefixed(unit, NANO, "NANO", "n")


def pico(unit: Unit) -> Unit:
    return _prefixed(unit, PICO, "PICO", "p")


def femto(unit: Unit) -> Unit:
    return _prefixed(unit, FEMTO, "FEMTO", "f")


def atto(unit: Unit) -> Unit:
    return _prefixed(unit, ATTO, "ATTO", "a")


def zepto(unit: Unit) -> Unit:
    return _prefixed(unit, ZEPTO, "ZEPTO", "z")


def yocto(unit: Unit) -> Unit:
    return _prefixed(unit, YOCTO, "YOCTO", "y")


# dimensionless
RADIAN = new_unit().of_dimension(dims.ANGLE).as_(UNITLESS).with_name("RADIAN").with_symbol("rad").create()
DEGREE = (
    new_unit()
    .of_dimension(dims.ANGLE)
    .as_the_ratio(PI)
    .over(180)
    .of_a(RADIAN)
    .with_name("DEGREE")
    .with_symbol("°")
    .create()
)
STERADIAN = (
    new_unit().of_dimension(dims.SOLID_ANGLE).as_(UNITLESS).with_name("STERADIAN").with_symbol("sr").create()
)
STRAIN = new_unit().of_dimension(dims.STRAIN).as_(UNITLESS).with_name("STRAIN").with_symbol("ε").create()
PERCENT = (
    new_unit()
    .of_dimension(dims.DIMENSIONLESS)
    .as_the_ratio(1)
    .over(100)
    .of_a(UNITLESS)
    .with_name("PERCENT")
    .with_symbol("%")
    .create()
)

# time
HERTZ = new_unit().of_dimension(dims.FREQUENCY).as_(SECOND, -1).with_name("HERTZ").with_symbol("Hz").create()
DAY = new_unit().of_dimension(dims.TIME).as_exactly("86400").of_a(SECOND).with_name("DAY").with_symbol("d").create()
HOUR = new_unit().of_dimension(dims.TIME).as_exactly("3600").of_a(SECOND).with_name("HOUR").with_symbol("hr").create()
MINUTE = new_unit().of_dimension(dims.TIME).as_exactly("60").of_a(SECOND).with_name("MINUTE").with_symbol("min").create()
MILLISECOND = milli(SECOND)
MICROSECOND = micro(SECOND)
NANOSECOND = nano(SECOND)

# mass
GRAM = new_unit().of_dimension(dims.MASS).as_exactly(MILLI).of_a(KILOGRAM).with_name("GRAM").with_symbol("g").create()
MILLIGRAM = milli(GRAM)

# length, area, volume
CENTIMETER = centi(METER)
MILLIMETER = milli(METER)
KILOMETER = kilo(METER)
SQUARE_METER = new_unit().of_dimension(dims.AREA).as_(METER, SQUARED).create()
SQUARE_CENTIMETER = new_unit().of_dimension(dims.AREA).as_(CENTIMETER, SQUARED).create()
SQUARE_MILLIMETER = new_unit().of_dimension(dims.AREA).as_(MILLIMETER, SQUARED).create()
CUBIC_METER = new_unit().of_dimension(dims.VOLUME).as_(METER, CUBED).create()
CUBIC_CENTIMETER = new_unit().of_dimension(dims.VOLUME).as_(CENTIMETER, CUBED).create()
CUBIC_MILLIMETER = new_unit().of_dimension(dims.VOLUME).as_(MILLIMETER, CUBED).create()

# kinematics
METER_PER_SECOND = new_unit().of_dimension(dims.VELOCITY).as_(METER).divide(SECOND).create()
CENTIMETER_PER_SECOND = new_unit().of_dimension(dims.VELOCITY).as_(CENTIMETER).divide(SECOND).create()
METER_PER_SQUARE_SECOND = new_unit().of_dimension(dims.ACCELERATION).as_(METER).divide(SECOND, 2).create()
CENTIMETER_PER_SQUARE_SECOND = (
    new_unit().of_dimension(dims.ACCELERATION).as_(CENTIMETER).divide(SECOND, 2).create()
)

# mass densities
KILOGRAM_PER_METER = new_unit().of_dimension(dims.LINEAR_MASS_DENSITY).as_(KILOGRAM).divide(METER).create()
KILOGRAM_PER_CENTIMETER = (
    new_unit().of_dimension(dims.LINEAR_MASS_DENSITY).as_(KILOGRAM).divide(CENTIMETER).create()
)
KILOGRAM_PER_SQUARE_METER = (
    new_unit().of_dimension(dims.AREA_MASS_DENSITY).as_(KILOGRAM).divide(SQUARE_METER).create()
)
KILOGRAM_PER_SQUARE_CENTIMETER = (
    new_unit().of_dimension(dims.AREA_MASS_DENSITY).as_(KILOGRAM).divide(SQUARE_CENTIMETER).create()
)
KILOGRAM_PER_SQUARE_MILLIMETER = (
    new_unit().of_dimension(dims.AREA_MASS_DENSITY).as_(KILOGRAM).divide(SQUARE_MILLIMETER).create()
)
KILOGRAM_PER_CUBIC_METER = new_unit().of_dimension(dims.MASS_DENSITY).as_(KILOGRAM).divide(CUBIC_METER).create()
KILOGRAM_PER_CUBIC_CENTIMETER = (
    new_unit().of_dimension(dims.MASS_DENSITY).as_(KILOGRAM).divide(CUBIC_CENTIMETER).create()
)
KILOGRAM_PER_CUBIC_MILLIMETER = (
    new_unit().of_dimension(dims.MASS_DENSITY).as_(KILOGRAM).divide(CUBIC_MILLIMETER).create()
)

# force and moment
NEWTON = (
    new_unit()
    .of_dimension(dims.FORCE)
    .as_(KILOGRAM)
    .multiply(METER_PER_SQUARE_SECOND)
    .with_name("NEWTON")
    .with_symbol("N")
    .create()
)
KILONEWTON = kilo(NEWTON)
MEGANEWTON = mega(NEWTON)
NEWTON_METER = new_unit().of_dimension(dims.MOMENT).as_(NEWTON).multiply(METER).create()
KILONEWTON_METER = new_unit().of_dimension(dims.MOMENT).as_(KILONEWTON).multiply(METER).create()
NEWTON_CENTIMETER = new_unit().of_dimension(dims.MOMENT).as_(NEWTON).multiply(CENTIMETER).create()
NEWTON_MILLIMETER = new_unit().of_dimension(dims.MOMENT).as_(NEWTON).multiply(MILLIMETER).create()
NEWTON_PER_METER = new_unit().of_dimension(dims.LINEAR_WEIGHT_DENSITY).as_(NEWTON).divide(METER).create()
KILONEWTON_PER_METER = (
    new_unit().of_dimension(dims.LINEAR_WEIGHT_DENSITY).as_(KILONEWTON).divide(METER).create()
)

# pressure and stress
PASCAL = (
    new_unit()
    .of_dimension(dims.PRESSURE)
    .as_(NEWTON)
    .divide(SQUARE_METER)
    .with_name("PASCAL")
    .with_symbol("Pa")
    .create()
)
KILOPASCAL = kilo(PASCAL)
MEGAPASCAL = mega(PASCAL)
NEWTON_PER_SQUARE_CENTIMETER = (
    new_unit().of_dimension(dims.AREA_WEIGHT_DENSITY).as_(NEWTON).divide(SQUARE_CENTIMETER).create()
)
KILONEWTON_PER_SQUARE_CENTIMETER = (
    new_unit().of_dimension(dims.AREA_WEIGHT_DENSITY).as_(KILONEWTON).divide(SQUARE_CENTIMETER).create()
)
NEWTON_PER_SQUARE_MILLIMETER = (
    new_unit().of_dimension(dims.AREA_WEIGHT_DENSITY).as_(NEWTON).divide(SQUARE_MILLIMETER).create()
)
KILONEWTON_PER_SQUARE_MILLIMETER = (
    new_unit().of_dimension(dims.AREA_WEIGHT_DENSITY).as_(KILONEWTON).divide(SQUARE_MILLIMETER).create()
)
NEWTON_PER_CUBIC_METER = new_unit().of_dimension(dims.WEIGHT_DENSITY).as_(NEWTON).divide(CUBIC_METER).create()
NEWTON_PER_CUBIC_CENTIMETER = (
    new_unit().of_dimension(dims.WEIGHT_DENSITY).as_(NEWTON).divide(CUBIC_CENTIMETER).create()
)
NEWTON_PER_CUBIC_MILLIMETER = (
    new_unit().of_dimension(dims.WEIGHT_DENSITY).as_(NEWTON).divide(CUBIC_MILLIMETER).create()
)

# energy and power
JOULE = new_unit().of_dimension(dims.ENERGY).as_(NEWTON).multiply(METER).with_name("JOULE").with_symbol("J").create()
KILOJOULE = kilo(JOULE)
MEGAJOULE = mega(JOULE)
WATT = new_unit().of_dimension(dims.POWER).as_(JOULE).divide(SECOND).with_name("WATT").with_symbol("W").create()
KILOWATT = kilo(WATT)
MEGAWATT = mega(WATT)

# electromagnetism
COULOMB = (
    new_unit()
    .of_dimension(dims.ELECTRIC_CHARGE)
    .as_(AMPERE)
    .multiply(SECOND)
    .with_name("COULOMB")
    .with_symbol("C")
    .create()
)
VOLT = (
    new_unit()
    .of_dimension(dims.ELECTRIC_POTENTIAL)
    .as_(WATT)
    .divide(AMPERE)
    .with_name("VOLT")
    .with_symbol("V")
    .create()
)
FARAD = (
    new_unit()
    .of_dimension(dims.ELECTRIC_CAPACITANCE)
    .as_(COULOMB)
    .divide(VOLT)
    .with_name("FARAD")
    .with_symbol("F")
    .create()
)
OHM = (
    new_unit()
    .of_dimension(dims.ELECTRIC_RESISTANCE)
    .as_(VOLT)
    .divide(AMPERE)
    .with_name("OHM")
    .with_symbol("Ω")
    .create()
)
SIEMENS = (
    new_unit()
    .of_dimension(dims.ELECTRIC_CONDUCTANCE)
    .as_(OHM, -1)
    .with_name("SIEMENS")
    .with_symbol("℧")
    .create()
)
WEBER = (
    new_unit()
    .of_dimension(dims.MAGNETIC_FLUX)
    .as_(VOLT)
    .multiply(SECOND)
    .with_name("WEBER")
    .with_symbol("Wb")
    .create()
)
TESLA = (
    new_unit()
    .of_dimension(dims.AREA_MAGNETIC_FLUX_DENSITY)
    .as_(WEBER)
    .divide(SQUARE_METER)
    .with_name("TESLA")
    .with_symbol("T")
    .create()
)
HENRY = (
    new_unit()
    .of_dimension(dims.INDUCTANCE)
    .as_(WEBER)
    .divide(AMPERE)
    .with_name("HENRY")
    .with_symbol("H")
    .create()
)

# photometry, radiation, chemistry
LUMEN = (
    new_unit()
    .of_dimension(dims.LUMINOUS_FLUX)
    .as_(CANDELA)
    .multiply(STERADIAN)
    .with_name("LUMEN")
    .with_symbol("lm")
    .create()
)
LUX = new_unit().of_dimension(dims.ILLUMINANCE).as_(LUMEN).divide(SQUARE_METER).with_name("LUX").with_symbol("lx").create()
BECQUEREL = (
    new_unit().of_dimension(dims.RADIOACTIVITY).as_(SECOND, -1).with_name("BECQUEREL").with_symbol("Bq").create()
)
GRAY = (
    new_unit().of_dimension(dims.ABSORBED_DOSE).as_(JOULE).divide(KILOGRAM).with_name("GRAY").with_symbol("Gy").create()
)
KATAL = (
    new_unit()
    .of_dimension(dims.CATALYTIC_ACTIVITY)
    .as_(MOLE)
    .divide(SECOND)
    .with_name("KATAL")
    .with_symbol("kat")
    .create()
)

# US customary reference units
FOOT = new_unit().of_dimension(dims.LENGTH).as_exactly("0.3048").of_a(METER).with_name("FOOT").with_symbol("ft").create()
SLUG = (
    new_unit().of_dimension(dims.MASS).as_exactly("14.593903").of_a(KILOGRAM).with_name("SLUG").with_symbol("slug").create()
)
RANKINE = (
    new_unit()
    .of_dimension(dims.THERMODYNAMIC_TEMPERATURE)
    .as_the_ratio(5)
    .over(9)
    .of_a(KELVIN)
    .with_name("RANKINE")
    .with_symbol("R")
    .create()
)
INCH = (
    new_unit().of_dimension(dims.LENGTH).as_the_ratio(1).over(12).of_a(FOOT).with_name("INCH").with_symbol("in").create()
)
YARD = new_unit().of_dimension(dims.LENGTH).as_exactly(3).of_a(FOOT).with_name("YARD").with_symbol("yd").create()
SQUARE_FOOT = new_unit().of_dimension(dims.AREA).as_(FOOT, SQUARED).create()
SQUARE_INCH = new_unit().of_dimension(dims.AREA).as_(INCH, SQUARED).create()
SQUARE_YARD = new_unit().of_dimension(dims.AREA).as_(YARD, SQUARED).create()
CUBIC_FOOT = new_unit().of_dimension(dims.VOLUME).as_(FOOT, CUBED).create()
CUBIC_INCH = new_unit().of_dimension(dims.VOLUME).as_(INCH, CUBED).create()
CUBIC_YARD = new_unit().of_dimension(dims.VOLUME).as_(YARD, CUBED).create()
FOOT_PER_SECOND = new_unit().of_dimension(dims.VELOCITY).as_(FOOT).divide(SECOND).create()
INCH_PER_SECOND = new_unit().of_dimension(dims.VELOCITY).as_(INCH).divide(SECOND).create()
FOOT_PER_SQUARE_SECOND = new_unit().of_dimension(dims.ACCELERATION).as_(FOOT).divide(SECOND, SQUARED).create()
INCH_PER_SQUARE_SECOND = new_unit().of_dimension(dims.ACCELERATION).as_(INCH).divide(SECOND, SQUARED).create()
SLUG_PER_FOOT = new_unit().of_dimension(dims.LINEAR_MASS_DENSITY).as_(SLUG).divide(FOOT).create()
SLUG_PER_INCH = new_unit().of_dimension(dims.LINEAR_MASS_DENSITY).as_(SLUG).divide(INCH).create()
SLUG_PER_SQUARE_FOOT = new_unit().of_dimension(dims.AREA_MASS_DENSITY).as_(SLUG).divide(SQUARE_FOOT).create()
SLUG_PER_SQUARE_INCH = new_unit().of_dimension(dims.AREA_MASS_DENSITY).as_(SLUG).divide(SQUARE_INCH).create()
SLUG_PER_CUBIC_FOOT = new_unit().of_dimension(dims.MASS_DENSITY).as_(SLUG).divide(CUBIC_FOOT).create()
SLUG_PER_CUBIC_INCH = new_unit().of_dimension(dims.MASS_DENSITY).as_(SLUG).divide(CUBIC_INCH).create()

# US customary force, moment, pressure
POUND = (
    new_unit()
    .of_dimension(dims.FORCE)
    .as_(SLUG)
    .multiply(FOOT_PER_SQUARE_SECOND)
    .with_name("POUND")
    .with_symbol("lb")
    .create()
)
KIP = new_unit().of_dimension(dims.FORCE).as_exactly(1000).of_a(POUND).with_name("KIP").with_symbol("k").create()
POUND_FOOT = new_unit().of_dimension(dims.MOMENT).as_(POUND).multiply(FOOT).create()
POUND_INCH = new_unit().of_dimension(dims.MOMENT).as_(POUND).multiply(INCH).create()
KIP_FOOT = new_unit().of_dimension(dims.MOMENT).as_(KIP).multiply(FOOT).create()
KIP_INCH = new_unit().of_dimension(dims.MOMENT).as_(KIP).multiply(INCH).create()
POUND_PER_FOOT = new_unit().of_dimension(dims.LINEAR_WEIGHT_DENSITY).as_(POUND).divide(FOOT).create()
POUND_PER_INCH = new_unit().of_dimension(dims.LINEAR_WEIGHT_DENSITY).as_(POUND).divide(INCH).create()
KIP_PER_FOOT = new_unit().of_dimension(dims.LINEAR_WEIGHT_DENSITY).as_(KIP).divide(FOOT).create()
KIP_PER_INCH = new_unit().of_dimension(dims.LINEAR_WEIGHT_DENSITY).as_(KIP).divide(INCH).create()
POUND_PER_SQUARE_FOOT = new_unit().of_dimension(dims.PRESSURE).as_(POUND).divide(SQUARE_FOOT).create()
POUND_PER_SQUARE_INCH = (
    new_unit().of_dimension(dims.PRESSURE).as_(POUND).divide(SQUARE_INCH).with_symbol("psi").create()
)
KIP_PER_SQUARE_FOOT = new_unit().of_dimension(dims.PRESSURE).as_(KIP).divide(SQUARE_FOOT).create()
KIP_PER_SQUARE_INCH = new_unit().of_dimension(dims.PRESSURE).as_(KIP).divide(SQUARE_INCH).with_symbol("ksi").create()
POUND_PER_CUBIC_FOOT = new_unit().of_dimension(dims.WEIGHT_DENSITY).as_(POUND).divide(CUBIC_FOOT).create()
POUND_PER_CUBIC_INCH = new_unit().of_dimension(dims.WEIGHT_DENSITY).as_(POUND).divide(CUBIC_INCH).create()
POUND_PER_CUBIC_YARD = new_unit().of_dimension(dims.WEIGHT_DENSITY).as_(POUND).divide(CUBIC_YARD).create()


__all__ = [
    "AMPERE",
    "BECQUEREL",
    "CANDELA",
    "CENTIMETER",
    "CENTIMETER_PER_SECOND",
    "CENTIMETER_PER_SQUARE_SECOND",
    "COULOMB",
    "CUBIC_CENTIMETER",
    "CUBIC_FOOT",
    "CUBIC_INCH",
    "CUBIC_METER",
    "CUBIC_MILLIMETER",
    "CUBIC_YARD",
    "DAY",
    "DEGREE",
    "FARAD",
    "FOOT",
    "FOOT_PER_SECOND",
    "FOOT_PER_SQUARE_SECOND",
    "GRAM",
    "GRAY",
    "HENRY",
    "HERTZ",
    "HOUR",
    "INCH",
    "INCH_PER_SECOND",
    "INCH_PER_SQUARE_SECOND",
    "JOULE",
    "KATAL",
    "KELVIN",
    "KILOGRAM",
    "KILOGRAM_PER_CENTIMETER",
    "KILOGRAM_PER_CUBIC_CENTIMETER",
    "KILOGRAM_PER_CUBIC_METER",
    "KILOGRAM_PER_CUBIC_MILLIMETER",
    "KILOGRAM_PER_METER",
    "KILOGRAM_PER_SQUARE_CENTIMETER",
    "KILOGRAM_PER_SQUARE_METER",
    "KILOGRAM_PER_SQUARE_MILLIMETER",
    "KILOJOULE",
    "KILOMETER",
    "KILONEWTON",
    "KILONEWTON_METER",
    "KILONEWTON_PER_METER",
    "KILONEWTON_PER_SQUARE_CENTIMETER",
    "KILONEWTON_PER_SQUARE_MILLIMETER",
    "KILOPASCAL",
    "KILOWATT",
    "KIP",
    "KIP_FOOT",
    "KIP_INCH",
    "KIP_PER_FOOT",
    "KIP_PER_INCH",
    "KIP_PER_SQUARE_FOOT",
    "KIP_PER_SQUARE_INCH",
    "LUMEN",
    "LUX",
    "MEGAJOULE",
    "MEGANEWTON",
    "MEGAPASCAL",
    "MEGAWATT",
    "METER",
    "METER_PER_SECOND",
    "METER_PER_SQUARE_SECOND",
    "MICROSECOND",
    "MILLIGRAM",
    "MILLIMETER",
    "MILLISECOND",
    "MINUTE",
    "MOLE",
    "NANOSECOND",
    "NEWTON",
    "NEWTON_CENTIMETER",
    "NEWTON_METER",
    "NEWTON_MILLIMETER",
    "NEWTON_PER_CUBIC_CENTIMETER",
    "NEWTON_PER_CUBIC_METER",
    "NEWTON_PER_CUBIC_MILLIMETER",
    "NEWTON_PER_METER",
    "NEWTON_PER_SQUARE_CENTIMETER",
    "NEWTON_PER_SQUARE_MILLIMETER",
    "OHM",
    "PASCAL",
    "PERCENT",
    "POUND",
    "POUND_FOOT",
    "POUND_INCH",
    "POUND_PER_CUBIC_FOOT",
    "POUND_PER_CUBIC_INCH",
    "POUND_PER_CUBIC_YARD",
    "POUND_PER_FOOT",
    "POUND_PER_INCH",
    "POUND_PER_SQUARE_FOOT",
    "POUND_PER_SQUARE_INCH",
    "RADIAN",
    "RANKINE",
    "SECOND",
    "SIEMENS",
    "SLUG",
    "SLUG_PER_CUBIC_FOOT",
    "SLUG_PER_CUBIC_INCH",
    "SLUG_PER_FOOT",
    "SLUG_PER_INCH",
    "SLUG_PER_SQUARE_FOOT",
    "SLUG_PER_SQUARE_INCH",
    "SQUARE_CENTIMETER",
    "SQUARE_FOOT",
    "SQUARE_INCH",
    "SQUARE_METER",
    "SQUARE_MILLIMETER",
    "SQUARE_YARD",
    "STERADIAN",
    "STRAIN",
    "TESLA",
    "UNITLESS",
    "VOLT",
    "WATT",
    "WEBER",
    "YARD",
    "atto",
    "centi",
    "deca",
    "deci",
    "exa",
    "femto",
    "giga",
    "hecto",
    "kilo",
    "mega",
    "micro",
    "milli",
    "nano",
    "peta",
    "pico",
    "tera",
    "yocto",
    "yotta",
    "zepto",
    "zetta",
]
