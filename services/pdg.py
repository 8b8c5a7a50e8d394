"""
PDG particle codes and species predicates.

Only the handful of species the enumeration and record initialization need.
Full property tables are looked up elsewhere.
"""

# Leptons
PDG_ELECTRON = 11
PDG_NU_E = 12
PDG_MUON = 13
PDG_NU_MU = 14
PDG_TAU = 15
PDG_NU_TAU = 16

PDG_ANTI_NU_E = -PDG_NU_E
PDG_ANTI_NU_MU = -PDG_NU_MU
PDG_ANTI_NU_TAU = -PDG_NU_TAU

NEUTRINOS = (PDG_NU_E, PDG_NU_MU, PDG_NU_TAU)
ANTI_NEUTRINOS = (PDG_ANTI_NU_E, PDG_ANTI_NU_MU, PDG_ANTI_NU_TAU)

# Nucleons
PDG_PROTON = 2212
PDG_NEUTRON = 2112

# Masses in GeV
NUCLEON_MASSES = {
    PDG_PROTON: 0.938272,
    PDG_NEUTRON: 0.939565,
}

PARTICLE_NAMES = {
    PDG_ELECTRON: "e-",
    PDG_NU_E: "nu_e",
    PDG_MUON: "mu-",
    PDG_NU_MU: "nu_mu",
    PDG_TAU: "tau-",
    PDG_NU_TAU: "nu_tau",
    PDG_ANTI_NU_E: "nu_e_bar",
    PDG_ANTI_NU_MU: "nu_mu_bar",
    PDG_ANTI_NU_TAU: "nu_tau_bar",
    PDG_PROTON: "proton",
    PDG_NEUTRON: "neutron",
}


def is_neutrino(pdg_code: int) -> bool:
    return pdg_code in NEUTRINOS


def is_antineutrino(pdg_code: int) -> bool:
    return pdg_code in ANTI_NEUTRINOS


def is_nucleon(pdg_code: int) -> bool:
    return pdg_code in (PDG_PROTON, PDG_NEUTRON)


def is_ion(pdg_code: int) -> bool:
    return 1000000000 <= pdg_code <= 1099999999


def ion_pdg_code(Z: int, A: int) -> int:
    """
    Nuclear code in the 10LZZZAAAI convention (L = I = 0).

    Example:
        ion_pdg_code(6, 12) -> 1000060120
    """
    return 1000000000 + Z * 10000 + A * 10


def particle_name(pdg_code: int) -> str:
    """Human readable name, falling back to the numeric code."""
    if pdg_code in PARTICLE_NAMES:
        return PARTICLE_NAMES[pdg_code]
    if is_ion(pdg_code):
        Z = (pdg_code // 10000) % 1000
        A = (pdg_code // 10) % 1000
        return f"ion(Z={Z},A={A})"
    return str(pdg_code)
