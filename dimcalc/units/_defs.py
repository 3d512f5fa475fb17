"""
Static catalog tables:  prefixes, categories and their units.

Categories are listed in precedence order.  SI base quantities come
first, then derived physical quantities and finally specialty
categories, so that a symbol used by more than one category resolves to
its primary meaning.  Every physical category uses its SI-coherent unit
as the base (factor 1).
"""
from functools import partial
import math

from ._catalog import (Prefix, UnitDefinition, Linear, Affine, Functional,
                       make_category)
from ._mathfn import MATH_FUNCTIONS, MATH_INVERSES, evaluate

# == Physical Constants ================================================

PLANCK = 6.62607015e-34  # J.s (exact, SI 2019).
LIGHT_SPEED = 299792458  # m/s (exact).
ELEM_CHARGE = 1.602176634e-19  # C (exact).
STD_GRAVITY = 9.80665  # m/s^2.

_LBM = 0.45359237  # kg.
_LBF = _LBM * STD_GRAVITY  # N.
_FT = 0.3048  # m.
_INCH = 0.0254  # m.
_MILE = 1609.344  # m.
_GAL_US = 3.785411784e-3  # m^3.
_GAL_UK = 4.54609e-3  # m^3.
_BTU = 1055.05585262  # J (IT).

# == Prefixes ==========================================================

PREFIXES = [
    Prefix('yotta', 'Yotta', 'Y', 1e24),
    Prefix('zetta', 'Zetta', 'Z', 1e21),
    Prefix('exa', 'Exa', 'E', 1e18),
    Prefix('peta', 'Peta', 'P', 1e15),
    Prefix('tera', 'Tera', 'T', 1e12),
    Prefix('giga', 'Giga', 'G', 1e9),
    Prefix('mega', 'Mega', 'M', 1e6),
    Prefix('kilo', 'Kilo', 'k', 1e3),
    Prefix('centi', 'Centi', 'c', 1e-2),
    Prefix('milli', 'Milli', 'm', 1e-3),
    Prefix('micro', 'Micro', 'µ', 1e-6),
    Prefix('nano', 'Nano', 'n', 1e-9),
    Prefix('pico', 'Pico', 'p', 1e-12),
    Prefix('femto', 'Femto', 'f', 1e-15),
    Prefix('atto', 'Atto', 'a', 1e-18),
    Prefix('zepto', 'Zepto', 'z', 1e-21),
    Prefix('yocto', 'Yocto', 'y', 1e-24),
]

BINARY_PREFIXES = [
    Prefix('exbi', 'Exbi', 'Ei', 2 ** 60, binary=True),
    Prefix('pebi', 'Pebi', 'Pi', 2 ** 50, binary=True),
    Prefix('tebi', 'Tebi', 'Ti', 2 ** 40, binary=True),
    Prefix('gibi', 'Gibi', 'Gi', 2 ** 30, binary=True),
    Prefix('mebi', 'Mebi', 'Mi', 2 ** 20, binary=True),
    Prefix('kibi', 'Kibi', 'Ki', 2 ** 10, binary=True),
]

PREFIX_ALIASES = {'μ': 'micro'}  # Greek mu (U+03BC) for micro sign.

# Unit symbols which are also prefix symbols by SI convention.  Bare,
# these are the unit; prefixed forms such as 'mm' or 'Tm' still split.
SHARED_SYMBOLS = ('m', 'T')


# ----------------------------------------------------------------------

def _lin(uid, name, symbol, factor, prefixes=False, aliases=()):
    return UnitDefinition(uid, name, symbol, Linear(factor), prefixes,
                          tuple(aliases))


def _aff(uid, name, symbol, factor, offset, aliases=()):
    return UnitDefinition(uid, name, symbol, Affine(factor, offset), False,
                          tuple(aliases))


def _fn(uid, name, symbol, forward, inverse, aliases=()):
    return UnitDefinition(uid, name, symbol, Functional(forward, inverse),
                          False, tuple(aliases))


def _reciprocal(k: float):
    """Function x -> k / x, which is its own inverse."""
    def f(x: float) -> float:
        try:
            return k / x
        except ZeroDivisionError:
            return math.copysign(math.inf, x) if k else math.nan
    return f


def _half_life(scale: float):
    # Decay constant λ = ln2 / t½, with t½ in units of `scale` seconds.
    f = _reciprocal(math.log(2))
    return partial(_fn, forward=lambda t: f(t * scale),
                   inverse=lambda lam: f(lam) / scale)


def _wavelength(scale: float):
    # Photon energy E = hc / λ, with λ in units of `scale` metres.
    f = _reciprocal(PLANCK * LIGHT_SPEED)
    return partial(_fn, forward=lambda wl: f(wl * scale),
                   inverse=lambda e: f(e) / scale)


def _spl_forward(db: float) -> float:
    try:
        return 20e-6 * 10 ** (db / 20)
    except OverflowError:
        return math.inf


def _spl_inverse(pa: float) -> float:
    if pa <= 0:
        return -math.inf if pa == 0 else math.nan
    return 20 * math.log10(pa / 20e-6)


# == SI Base Quantities ================================================

_BASE = dict(is_base=True)

CATEGORIES = [

    # -- Length --------------------------------------------------------

    make_category('length', 'Length', {'length': 1}, [
        _lin('m', 'Meter', 'm', 1, prefixes=True),
        _lin('in', 'Inch', 'in', _INCH),
        _lin('ft', 'Foot', 'ft', _FT),
        _lin('yd', 'Yard', 'yd', 0.9144),
        _lin('mi', 'Mile', 'mi', _MILE),
        _lin('nmi', 'Nautical Mile', 'nmi', 1852, aliases=['NM']),
        _lin('angstrom', 'Ångström', 'Å', 1e-10, aliases=['angstrom']),
        _lin('au', 'Astronomical Unit', 'au', 1.495978707e11,
             aliases=['AU']),
        _lin('ly', 'Light Year', 'ly', 9.4607304725808e15),
        _lin('parsec', 'Parsec', 'pc', 3.0856775814913673e16),
    ], **_BASE),

    # -- Mass ----------------------------------------------------------

    make_category('mass', 'Mass', {'mass': 1}, [
        _lin('kg', 'Kilogram', 'kg', 1),
        _lin('g', 'Gram', 'g', 1e-3, prefixes=True),
        _lin('t', 'Metric Tonne', 't', 1000),
        _lin('lb', 'Pound', 'lb', _LBM, aliases=['lbm']),
        _lin('oz', 'Ounce', 'oz', _LBM / 16),
        _lin('st', 'Stone', 'st', _LBM * 14),
        _lin('ton_us', 'Short Ton (US)', 'ton', _LBM * 2000),
        _lin('ton_uk', 'Long Ton (UK)', 'ton(UK)', _LBM * 2240),
        _lin('gr', 'Grain', 'gr', 6.479891e-5),
        _lin('carat', 'Carat', 'ct', 2e-4),
        _lin('slug', 'Slug', 'slug', _LBF / _FT),
        _lin('dalton', 'Dalton', 'Da', 1.66053906660e-27, prefixes=True),
    ], **_BASE),

    # -- Time ----------------------------------------------------------

    make_category('time', 'Time', {'time': 1}, [
        _lin('s', 'Second', 's', 1, prefixes=True, aliases=['sec']),
        _lin('min', 'Minute', 'min', 60),
        _lin('h', 'Hour', 'h', 3600, aliases=['hr']),
        _lin('d', 'Day', 'd', 86400, aliases=['day']),
        _lin('wk', 'Week', 'wk', 604800),
        _lin('mo', 'Month (Avg)', 'mo', 2629800),
        _lin('y', 'Year', 'yr', 31557600),
    ], **_BASE),

    # -- Electric Current ----------------------------------------------

    make_category('current', 'Electric Current', {'current': 1}, [
        _lin('a', 'Ampere', 'A', 1, prefixes=True),
    ], **_BASE),

    # -- Temperature ---------------------------------------------------

    make_category('temperature', 'Temperature', {'temperature': 1}, [
        _lin('k', 'Kelvin', 'K', 1, prefixes=True),
        _aff('c', 'Celsius', '°C', 1, 273.15, aliases=['℃', 'degC']),
        _aff('f', 'Fahrenheit', '°F', 5 / 9, 459.67,
             aliases=['℉', 'degF']),
        _lin('r', 'Rankine', '°R', 5 / 9, aliases=['degR']),
    ], **_BASE),

    # -- Amount of Substance -------------------------------------------

    make_category('amount', 'Amount of Substance', {'amount': 1}, [
        _lin('mol', 'Mole', 'mol', 1, prefixes=True),
    ], **_BASE),

    # -- Luminous Intensity --------------------------------------------

    make_category('intensity', 'Luminous Intensity', {'intensity': 1}, [
        _lin('cd', 'Candela', 'cd', 1, prefixes=True),
    ], **_BASE),

    # -- Angles --------------------------------------------------------

    make_category('angle', 'Plane Angle', {'angle': 1}, [
        _lin('rad', 'Radian', 'rad', 1, prefixes=True),
        _lin('deg', 'Degree', '°', math.pi / 180, aliases=['deg']),
        _lin('grad', 'Gradian', 'gon', math.pi / 200, aliases=['grad']),
        _lin('arcmin', 'Arcminute', '′', math.pi / 10800,
             aliases=['arcmin']),
        _lin('arcsec', 'Arcsecond', '″', math.pi / 648000,
             aliases=['arcsec']),
        _lin('turn', 'Turn', 'rev', 2 * math.pi, aliases=['turn']),
    ], **_BASE),

    make_category('solid_angle', 'Solid Angle', {'solid_angle': 1}, [
        _lin('sr', 'Steradian', 'sr', 1, prefixes=True),
        _lin('deg2', 'Square Degree', 'deg²', (math.pi / 180) ** 2),
    ], **_BASE),

    # == Derived Quantities ============================================

    # -- Mechanics -----------------------------------------------------

    make_category('area', 'Area', {'length': 2}, [
        _lin('m2', 'Square Meter', 'm²', 1, aliases=['m2']),
        _lin('km2', 'Square Kilometer', 'km²', 1e6, aliases=['km2']),
        _lin('ha', 'Hectare', 'ha', 1e4),
        _lin('acre', 'Acre', 'ac', 4046.8564224, aliases=['acre']),
        _lin('sqin', 'Square Inch', 'in²', _INCH ** 2),
        _lin('sqft', 'Square Foot', 'ft²', _FT ** 2),
        _lin('sqyd', 'Square Yard', 'yd²', 0.9144 ** 2),
        _lin('sqmi', 'Square Mile', 'mi²', _MILE ** 2),
        _lin('barn', 'Barn', 'b', 1e-28, prefixes=True),
    ]),

    make_category('volume', 'Volume', {'length': 3}, [
        _lin('m3', 'Cubic Meter', 'm³', 1, aliases=['m3']),
        _lin('l', 'Liter', 'L', 1e-3, prefixes=True, aliases=['l']),
        _lin('cc', 'Cubic Centimeter', 'cc', 1e-6),
        _lin('in3', 'Cubic Inch', 'in³', _INCH ** 3),
        _lin('ft3', 'Cubic Foot', 'ft³', _FT ** 3),
        _lin('floz', 'Fluid Ounce (US)', 'fl oz', _GAL_US / 128),
        _lin('pt', 'Pint (US)', 'pt', _GAL_US / 8),
        _lin('qt', 'Quart (US)', 'qt', _GAL_US / 4),
        _lin('gal', 'Gallon (US)', 'gal', _GAL_US),
        _lin('gal_imp', 'Gallon (Imp)', 'gal(UK)', _GAL_UK),
        _lin('bbl', 'Oil Barrel', 'bbl', _GAL_US * 42),
    ]),

    make_category('speed', 'Speed', {'length': 1, 'time': -1}, [
        _lin('mps', 'Meter per Second', 'm/s', 1),
        _lin('kph', 'Kilometer per Hour', 'km/h', 1 / 3.6,
             aliases=['kph']),
        _lin('mph', 'Mile per Hour', 'mph', _MILE / 3600),
        _lin('fps', 'Foot per Second', 'ft/s', _FT, aliases=['fps']),
        _lin('knot', 'Knot', 'kn', 1852 / 3600, aliases=['kt']),
    ]),

    make_category('acceleration', 'Acceleration',
                  {'length': 1, 'time': -2}, [
        _lin('mps2', 'Meter per Second Squared', 'm/s²', 1),
        _lin('g0', 'Standard Gravity', 'g₀', STD_GRAVITY, aliases=['gn']),
        _lin('gal', 'Gal', 'Gal', 0.01, prefixes=True),
        _lin('fps2', 'Foot per Second Squared', 'ft/s²', _FT),
    ]),

    make_category('force', 'Force', {'mass': 1, 'length': 1, 'time': -2}, [
        _lin('n', 'Newton', 'N', 1, prefixes=True),
        _lin('dyn', 'Dyne', 'dyn', 1e-5),
        _lin('lbf', 'Pound-force', 'lbf', _LBF),
        _lin('kgf', 'Kilogram-force', 'kgf', STD_GRAVITY),
        _lin('kip', 'Kip', 'kip', _LBF * 1000),
    ]),

    make_category('pressure', 'Pressure',
                  {'mass': 1, 'length': -1, 'time': -2}, [
        _lin('pa', 'Pascal', 'Pa', 1, prefixes=True),
        _lin('bar', 'Bar', 'bar', 1e5, prefixes=True),
        _lin('atm', 'Atmosphere', 'atm', 101325),
        _lin('psi', 'Pound per Square Inch', 'psi', _LBF / _INCH ** 2),
        _lin('torr', 'Torr', 'Torr', 101325 / 760),
        _lin('mmhg', 'Millimeter of Mercury', 'mmHg', 133.322387415),
        _lin('inhg', 'Inch of Mercury', 'inHg', 3386.389),
    ]),

    make_category('energy', 'Energy', {'mass': 1, 'length': 2, 'time': -2}, [
        _lin('j', 'Joule', 'J', 1, prefixes=True),
        _lin('cal', 'Calorie', 'cal', 4.184, prefixes=True),
        _lin('wh', 'Watt-hour', 'Wh', 3600, prefixes=True),
        _lin('ev', 'Electronvolt', 'eV', ELEM_CHARGE, prefixes=True),
        _lin('erg', 'Erg', 'erg', 1e-7),
        _lin('btu', 'British Thermal Unit', 'BTU', _BTU),
        _lin('ftlbf', 'Foot-pound', 'ft⋅lbf', _FT * _LBF),
        _lin('therm', 'Therm', 'thm', _BTU * 1e5),
    ]),

    make_category('power', 'Power', {'mass': 1, 'length': 2, 'time': -3}, [
        _lin('w', 'Watt', 'W', 1, prefixes=True),
        _lin('hp', 'Horsepower (Mech)', 'hp', 550 * _FT * _LBF),
        _lin('hp_m', 'Horsepower (Metric)', 'PS', 75 * STD_GRAVITY),
        _lin('btuh', 'BTU per Hour', 'BTU/h', _BTU / 3600),
    ]),

    make_category('frequency', 'Frequency', {'time': -1}, [
        _lin('hz', 'Hertz', 'Hz', 1, prefixes=True),
        _lin('rpm', 'Revolutions per Minute', 'rpm', 1 / 60),
        _lin('bpm', 'Beats per Minute', 'bpm', 1 / 60),
    ]),

    make_category('momentum', 'Momentum',
                  {'mass': 1, 'length': 1, 'time': -1}, [
        _lin('kgmps', 'Kilogram Meter per Second', 'kg⋅m/s', 1),
        _lin('ns', 'Newton Second', 'N⋅s', 1),
    ]),

    make_category('angular_momentum', 'Angular Momentum',
                  {'mass': 1, 'length': 2, 'time': -1}, [
        _lin('js', 'Joule Second', 'J⋅s', 1),
    ]),

    make_category('angular_velocity', 'Angular Velocity',
                  {'angle': 1, 'time': -1}, [
        _lin('radps', 'Radian per Second', 'rad/s', 1),
        _lin('degps', 'Degree per Second', '°/s', math.pi / 180),
        _lin('revpm', 'Revolution per Minute', 'rev/min', 2 * math.pi / 60),
    ]),

    make_category('torque', 'Torque', {'mass': 1, 'length': 2, 'time': -2}, [
        _lin('nm', 'Newton Meter', 'N⋅m', 1, aliases=['Nm']),
        _lin('lbfft', 'Pound-force Foot', 'lbf⋅ft', _LBF * _FT),
        _lin('kgfm', 'Kilogram-force Meter', 'kgf⋅m', STD_GRAVITY),
    ]),

    make_category('density', 'Density', {'mass': 1, 'length': -3}, [
        _lin('kgm3', 'Kilogram per Cubic Meter', 'kg/m³', 1),
        _lin('gcm3', 'Gram per Cubic Centimeter', 'g/cm³', 1000),
        _lin('gml', 'Gram per Milliliter', 'g/mL', 1000),
        _lin('lbft3', 'Pound per Cubic Foot', 'lb/ft³', _LBM / _FT ** 3),
    ]),

    make_category('flow', 'Flow Rate', {'length': 3, 'time': -1}, [
        _lin('m3s', 'Cubic Meter per Second', 'm³/s', 1),
        _lin('lps', 'Liter per Second', 'L/s', 1e-3),
        _lin('lpm', 'Liter per Minute', 'L/min', 1e-3 / 60),
        _lin('gpm', 'Gallon per Minute (US)', 'gpm', _GAL_US / 60),
        _lin('cfm', 'Cubic Foot per Minute', 'cfm', _FT ** 3 / 60),
    ]),

    make_category('viscosity', 'Viscosity',
                  {'mass': 1, 'length': -1, 'time': -1}, [
        _lin('pas', 'Pascal Second', 'Pa⋅s', 1),
        # Not 'P', which is the Peta prefix.
        _lin('poise', 'Poise', 'Po', 0.1),
        _lin('cp', 'Centipoise', 'cP', 1e-3),
    ]),

    make_category('kinematic_viscosity', 'Kinematic Viscosity',
                  {'length': 2, 'time': -1}, [
        _lin('m2s', 'Square Meter per Second', 'm²/s', 1),
        _lin('stokes', 'Stokes', 'St', 1e-4, prefixes=True),
    ]),

    make_category('surface_tension', 'Surface Tension',
                  {'mass': 1, 'time': -2}, [
        _lin('npm', 'Newton per Meter', 'N/m', 1),
        _lin('dyncm', 'Dyne per Centimeter', 'dyn/cm', 1e-3),
    ]),

    # -- Thermal -------------------------------------------------------

    make_category('thermal_conductivity', 'Thermal Conductivity',
                  {'mass': 1, 'length': 1, 'time': -3,
                   'temperature': -1}, [
        _lin('wmk', 'Watt per Meter Kelvin', 'W/(m⋅K)', 1),
        _lin('btuhftf', 'BTU per Hour Foot °F', 'BTU/(h⋅ft⋅°F)',
             _BTU / 3600 / _FT / (5 / 9)),
    ]),

    make_category('specific_heat', 'Specific Heat',
                  {'length': 2, 'time': -2, 'temperature': -1}, [
        _lin('jkgk', 'Joule per Kilogram Kelvin', 'J/(kg⋅K)', 1),
        _lin('btulbf', 'BTU per Pound °F', 'BTU/(lb⋅°F)',
             _BTU / _LBM / (5 / 9)),
    ]),

    make_category('entropy', 'Entropy',
                  {'mass': 1, 'length': 2, 'time': -2,
                   'temperature': -1}, [
        _lin('jk', 'Joule per Kelvin', 'J/K', 1),
    ]),

    # -- Electromagnetism ----------------------------------------------

    make_category('charge', 'Electric Charge', {'current': 1, 'time': 1}, [
        _lin('c', 'Coulomb', 'C', 1, prefixes=True),
        _lin('ah', 'Ampere-hour', 'Ah', 3600, prefixes=True),
    ]),

    make_category('potential', 'Electric Potential',
                  {'mass': 1, 'length': 2, 'time': -3, 'current': -1}, [
        _lin('v', 'Volt', 'V', 1, prefixes=True),
    ]),

    make_category('capacitance', 'Capacitance',
                  {'mass': -1, 'length': -2, 'time': 4, 'current': 2}, [
        _lin('f', 'Farad', 'F', 1, prefixes=True),
    ]),

    make_category('resistance', 'Resistance',
                  {'mass': 1, 'length': 2, 'time': -3, 'current': -2}, [
        _lin('ohm', 'Ohm', 'Ω', 1, prefixes=True,
             aliases=['ohm', '\u2126']),  # Ohm sign.
    ]),

    make_category('conductance', 'Conductance',
                  {'mass': -1, 'length': -2, 'time': 3, 'current': 2}, [
        _lin('s', 'Siemens', 'S', 1, prefixes=True, aliases=['mho']),
    ]),

    make_category('magnetic_flux', 'Magnetic Flux',
                  {'mass': 1, 'length': 2, 'time': -2, 'current': -1}, [
        _lin('wb', 'Weber', 'Wb', 1, prefixes=True),
        _lin('mx', 'Maxwell', 'Mx', 1e-8),
    ]),

    make_category('magnetic_density', 'Magnetic Flux Density',
                  {'mass': 1, 'time': -2, 'current': -1}, [
        _lin('t', 'Tesla', 'T', 1, prefixes=True),
        # Not 'G', which is the Giga prefix.
        _lin('gauss', 'Gauss', 'Gs', 1e-4, aliases=['gauss']),
    ]),

    make_category('inductance', 'Inductance',
                  {'mass': 1, 'length': 2, 'time': -2, 'current': -2}, [
        _lin('h', 'Henry', 'H', 1, prefixes=True),
    ]),

    make_category('electric_field', 'Electric Field',
                  {'mass': 1, 'length': 1, 'time': -3, 'current': -1}, [
        _lin('vpm', 'Volt per Meter', 'V/m', 1),
    ]),

    make_category('magnetic_field_h', 'Magnetic Field (H)',
                  {'current': 1, 'length': -1}, [
        _lin('apm', 'Ampere per Meter', 'A/m', 1),
        _lin('oe', 'Oersted', 'Oe', 1000 / (4 * math.pi)),
    ]),

    # -- Radiation -----------------------------------------------------

    make_category('radioactivity', 'Radioactivity', {'time': -1}, [
        _lin('bq', 'Becquerel', 'Bq', 1, prefixes=True),
        _lin('ci', 'Curie', 'Ci', 3.7e10, prefixes=True),
        _lin('dpm', 'Disintegrations per Minute', 'dpm', 1 / 60),
    ]),

    make_category('radioactive_decay', 'Radioactive Decay', {'time': -1}, [
        _lin('decay_const', 'Decay Constant', 'λ(s⁻¹)', 1),
        _half_life(1)('half_s', 'Half-life (seconds)', 't½(s)'),
        _half_life(60)('half_min', 'Half-life (minutes)', 't½(min)'),
        _half_life(3600)('half_h', 'Half-life (hours)', 't½(h)'),
        _half_life(86400)('half_d', 'Half-life (days)', 't½(d)'),
        _half_life(31557600)('half_y', 'Half-life (years)', 't½(y)'),
    ]),

    make_category('radiation_dose', 'Radiation Dose',
                  {'length': 2, 'time': -2}, [
        _lin('gy', 'Gray', 'Gy', 1, prefixes=True),
        # Shadowed by the plane angle radian when parsed.
        _lin('rad_dose', 'Rad', 'rad', 0.01),
    ]),

    make_category('absorbed_dose', 'Absorbed Dose',
                  {'length': 2, 'time': -2}, [
        _lin('gy', 'Gray', 'Gy', 1, prefixes=True),
        _lin('ergg', 'Erg per Gram', 'erg/g', 1e-4),
    ]),

    make_category('equivalent_dose', 'Equivalent Dose',
                  {'length': 2, 'time': -2}, [
        _lin('sv', 'Sievert', 'Sv', 1, prefixes=True),
        _lin('rem', 'Rem', 'rem', 0.01, prefixes=True),
    ]),

    make_category('cross_section', 'Cross-Section', {'length': 2}, [
        _lin('m2', 'Square Meter', 'm²', 1),
        _lin('barn', 'Barn', 'b', 1e-28, prefixes=True),
    ]),

    make_category('photon', 'Photon Energy',
                  {'mass': 1, 'length': 2, 'time': -2}, [
        _lin('j', 'Joule', 'J', 1, prefixes=True),
        _lin('ev', 'Electronvolt', 'eV', ELEM_CHARGE, prefixes=True),
        _wavelength(1e-9)('wl_nm', 'Wavelength (nm)', 'λ(nm)'),
        _wavelength(1e-6)('wl_um', 'Wavelength (µm)', 'λ(µm)'),
        _lin('thz', 'Frequency (THz)', 'f(THz)', PLANCK * 1e12),
        _lin('wavenumber', 'Wavenumber', 'ν̃(cm⁻¹)',
             PLANCK * LIGHT_SPEED * 100),
    ]),

    # -- Light and Sound -----------------------------------------------

    make_category('luminous_flux', 'Luminous Flux',
                  {'intensity': 1, 'solid_angle': 1}, [
        _lin('lm', 'Lumen', 'lm', 1, prefixes=True),
    ]),

    make_category('illuminance', 'Illuminance',
                  {'intensity': 1, 'solid_angle': 1, 'length': -2}, [
        _lin('lx', 'Lux', 'lx', 1, prefixes=True),
        _lin('fc', 'Foot-candle', 'fc', 1 / _FT ** 2),
        _lin('phot', 'Phot', 'ph', 1e4),
    ]),

    make_category('sound_pressure', 'Sound Pressure',
                  {'mass': 1, 'length': -1, 'time': -2}, [
        _lin('pa', 'Pascal', 'Pa', 1, prefixes=True),
        _fn('db_spl', 'Sound Pressure Level', 'dB(SPL)', _spl_forward,
            _spl_inverse),
    ]),

    make_category('sound_intensity', 'Sound Intensity',
                  {'mass': 1, 'time': -3}, [
        _lin('wm2', 'Watt per Square Meter', 'W/m²', 1),
    ]),

    make_category('acoustic_impedance', 'Acoustic Impedance',
                  {'mass': 1, 'length': -2, 'time': -1}, [
        _lin('rayl', 'Rayl', 'Rayl', 1, aliases=['Pa⋅s/m']),
    ]),

    make_category('refractive_power', 'Refractive Power', {'length': -1}, [
        _lin('dpt', 'Dioptre', 'dpt', 1),
    ]),

    # -- Chemistry -----------------------------------------------------

    make_category('catalytic', 'Catalytic Activity',
                  {'amount': 1, 'time': -1}, [
        _lin('kat', 'Katal', 'kat', 1, prefixes=True),
        _lin('enzyme_u', 'Enzyme Unit', 'U', 1e-6 / 60),
    ]),

    make_category('concentration', 'Concentration',
                  {'amount': 1, 'length': -3}, [
        _lin('molm3', 'Mole per Cubic Meter', 'mol/m³', 1),
        # Molar, not 'M' which is the Mega prefix.
        _lin('molar', 'Molar', 'mol/L', 1000),
        _lin('mmoll', 'Millimole per Liter', 'mmol/L', 1),
    ]),

    # == Specialty Categories ==========================================

    make_category('fuel', 'Fuel Energy',
                  {'mass': 1, 'length': 2, 'time': -2}, [
        _lin('j', 'Joule', 'J', 1, prefixes=True),
        _lin('toe', 'Tonne of Oil Equivalent', 'toe', 41.868e9),
        _lin('boe', 'Barrel of Oil Equivalent', 'BOE', 6.1178632e9),
        _lin('tce', 'Tonne of Coal Equivalent', 'tce', 29.3076e9),
    ]),

    make_category('fuel_economy', 'Fuel Economy', {'length': -2}, [
        _lin('mpm3', 'Meter per Cubic Meter', 'm/m³', 1),
        _lin('kml', 'Kilometer per Liter', 'km/L', 1e6),
        _lin('mpg', 'Miles per Gallon (US)', 'mpg', _MILE / _GAL_US),
        _lin('mpg_uk', 'Miles per Gallon (Imp)', 'mpg(UK)',
             _MILE / _GAL_UK),
        # 1 L/100 km == 100 km per litre == 1e8 m / m^3.
        _fn('l100km', 'Liters per 100 km', 'L/100km', _reciprocal(1e8),
            _reciprocal(1e8)),
    ]),

    make_category('lightbulb', 'Lightbulb Efficiency',
                  {'intensity': 1, 'solid_angle': 1}, [
        _lin('lm', 'Lumen', 'lm', 1),
        _lin('w_inc', 'Incandescent Watt Equivalent', 'W(inc)', 15),
        _lin('w_led', 'LED Watt Equivalent', 'W(LED)', 90),
    ]),

    make_category('data', 'Data/Information', {}, [
        _lin('byte', 'Byte', 'B', 1, prefixes=True),
        _lin('bit', 'Bit', 'bit', 0.125, prefixes=True),
        _lin('nibble', 'Nibble', 'nibble', 0.5),
    ], binary_prefixes=True),

    make_category('archaic_length', 'Archaic Length', {'length': 1}, [
        _lin('m', 'Meter', 'm', 1),
        _lin('cubit', 'Biblical Cubit', 'cubit', 0.4572),
        _lin('hand', 'Hand', 'hh', 0.1016),
        _lin('league', 'League (Land)', 'lea', 4828.032),
        _lin('fathom', 'Fathom', 'ftm', 1.8288),
        _lin('furlong', 'Furlong', 'fur', 201.168),
        _lin('chain', 'Chain (Gunter)', 'ch', 20.1168),
        _lin('rod', 'Rod', 'rd', 5.0292),
        _lin('link', 'Link (Gunter)', 'li', 0.201168),
        _lin('smoot', 'Smoot', 'smoot', 1.7018),
    ]),

    make_category('archaic_mass', 'Archaic Mass', {'mass': 1}, [
        _lin('kg', 'Kilogram', 'kg', 1),
        _lin('talent', 'Talent (Biblical)', 'talent', 34.2),
        _lin('shekel', 'Shekel', 'shekel', 0.0114),
        _lin('dwt', 'Pennyweight', 'dwt', 0.00155517384),
        _lin('oz_t', 'Troy Ounce', 'oz t', 0.0311034768),
    ]),

    make_category('archaic_volume', 'Archaic Volume', {'length': 3}, [
        _lin('m3', 'Cubic Meter', 'm³', 1),
        # Not 'min', which is the minute.
        _lin('minim', 'Minim', 'minim', _GAL_US / 61440),
        _lin('gill', 'Gill (US)', 'gi', _GAL_US / 32),
        _lin('hogshead', 'Hogshead (US)', 'hhd', _GAL_US * 63),
        _lin('firkin', 'Firkin', 'fir', 0.0409148),
        _lin('peck', 'Peck (US)', 'pk', 8.80976754172e-3),
        _lin('bushel', 'Bushel (US)', 'bu', 0.03523907016688),
    ]),

    make_category('archaic_area', 'Archaic Area', {'length': 2}, [
        _lin('m2', 'Square Meter', 'm²', 1),
        _lin('rood', 'Rood', 'rood', 1011.7141056),
        _lin('perch', 'Square Perch', 'perch', 25.29285264),
        _lin('dunam', 'Dunam', 'dunam', 1000),
    ]),

    make_category('archaic_energy', 'Archaic Energy',
                  {'mass': 1, 'length': 2, 'time': -2}, [
        _lin('j', 'Joule', 'J', 1),
        _lin('foe', 'Foe', 'foe', 1e44),
        _lin('quad', 'Quad', 'quad', _BTU * 1e15),
    ]),

    make_category('archaic_power', 'Archaic Power',
                  {'mass': 1, 'length': 2, 'time': -3}, [
        _lin('w', 'Watt', 'W', 1),
        _lin('poncelet', 'Poncelet', 'poncelet', 100 * STD_GRAVITY),
        _lin('lusec', 'Lusec', 'lusec', 1.333e-4),
    ]),

    make_category('typography', 'Typography', {'length': 1}, [
        _lin('m', 'Meter', 'm', 1),
        _lin('pt', 'Point (PostScript)', 'pt', _INCH / 72),
        _lin('pica', 'Pica', 'pica', _INCH / 6),
        _lin('px', 'Pixel (96 dpi)', 'px', _INCH / 96),
        _lin('didot', 'Didot Point', 'dd', 0.376065e-3),
        _lin('cicero', 'Cicero', 'cic', 12 * 0.376065e-3),
    ]),

    make_category('cooking', 'Cooking Measures', {'length': 3}, [
        _lin('m3', 'Cubic Meter', 'm³', 1),
        _lin('tsp', 'Teaspoon (US)', 'tsp', _GAL_US / 768),
        _lin('tbsp', 'Tablespoon (US)', 'tbsp', _GAL_US / 256),
        _lin('cup', 'Cup (US)', 'cup', _GAL_US / 16),
        _lin('dash', 'Dash', 'dash', _GAL_US / 6144),
        _lin('pinch', 'Pinch', 'pinch', _GAL_US / 12288),
    ]),

    make_category('beer_wine_volume', 'Beer & Wine Volume', {'length': 3}, [
        _lin('m3', 'Cubic Meter', 'm³', 1),
        _lin('bbl_beer', 'Beer Barrel (US)', 'bbl(beer)', _GAL_US * 31),
        _lin('keg', 'Half Barrel Keg', 'keg', _GAL_US * 15.5),
        _lin('bottle', 'Wine Bottle', 'bottle', 7.5e-4),
        _lin('magnum', 'Magnum', 'magnum', 1.5e-3),
        _lin('growler', 'Growler', 'growler', _GAL_US / 2),
        _lin('butt', 'Butt', 'butt', _GAL_US * 126),
        _lin('tun', 'Tun', 'tun', _GAL_US * 252),
    ]),

    make_category('rack_geometry', 'Rack Geometry', {'length': 1}, [
        _lin('m', 'Meter', 'm', 1),
        _lin('ru', 'Rack Unit', 'RU', 0.04445),
        _lin('hp_rack', 'Horizontal Pitch', 'HP', 0.00508),
    ]),

    make_category('shipping', 'Shipping Volume', {'length': 3}, [
        _lin('cbm', 'Cubic Meter', 'CBM', 1),
        _lin('teu', 'Twenty-foot Equivalent Unit', 'TEU', 38.5),
        _lin('feu', 'Forty-foot Equivalent Unit', 'FEU', 77),
        # Cubic yard; shadowed by the length yard when parsed.
        _lin('cuyd', 'Cubic Yard', 'yd', 0.9144 ** 3),
        _lin('rt', 'Register Ton', 'RT', 100 * _FT ** 3),
    ]),
]


# -- Math Functions ----------------------------------------------------

def _identity(x: float) -> float:
    return x


def _math_unit(fn_id: str) -> UnitDefinition:
    # Converting x -> fn_id applies the function; the reverse applies
    # its inverse where one exists.
    inv = MATH_INVERSES.get(fn_id)
    return _fn(fn_id, fn_id, f'{fn_id}(x)',
               partial(evaluate, inv) if inv else _identity,
               partial(evaluate, MATH_FUNCTIONS[fn_id]))


CATEGORIES.append(make_category(
    'math', 'Math Functions', {},
    [_lin('x', 'Value', 'x', 1)] + [_math_unit(f) for f in MATH_FUNCTIONS],
    indexed=False))

# == Derived Unit Table ================================================

# Symbol -> (category id, unit id), for SI named derived units.
SI_DERIVED_UNITS = {
    'Hz': ('frequency', 'hz'), 'N': ('force', 'n'),
    'Pa': ('pressure', 'pa'), 'J': ('energy', 'j'), 'W': ('power', 'w'),
    'C': ('charge', 'c'), 'V': ('potential', 'v'),
    'F': ('capacitance', 'f'), 'Ω': ('resistance', 'ohm'),
    'S': ('conductance', 's'), 'Wb': ('magnetic_flux', 'wb'),
    'T': ('magnetic_density', 't'), 'H': ('inductance', 'h'),
    'lm': ('luminous_flux', 'lm'), 'lx': ('illuminance', 'lx'),
    'Bq': ('radioactivity', 'bq'), 'Gy': ('radiation_dose', 'gy'),
    'Sv': ('equivalent_dose', 'sv'), 'kat': ('catalytic', 'kat'),
    'rad': ('angle', 'rad'), 'sr': ('solid_angle', 'sr'),
}

# Specialty categories sharing a formula with a physical quantity by
# coincidence.  These are never offered as equivalent quantities.
CROSS_DOMAIN_DENYLIST = (
    'archaic_length', 'archaic_mass', 'archaic_volume', 'archaic_area',
    'archaic_energy', 'archaic_power', 'typography', 'cooking',
    'beer_wine_volume', 'fuel', 'fuel_economy', 'lightbulb',
    'rack_geometry', 'shipping', 'data', 'math')
