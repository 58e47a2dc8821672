from atomtable import (
    AtomTableError,
    Element,
    atomic_weight,
    from_symbol,
    n_valence_electrons,
    valence,
)

if __name__ == '__main__':
    # Symbols and charges as a SMILES parser would hand them over
    atoms = [("C", 0), ("C", 0), ("O", 0), ("o", -1), ("Fe", 2)]

    mass = 0.0
    for symbol, formal_charge in atoms:
        element = from_symbol(symbol)
        mass += atomic_weight(element)
        try:
            print('{} ({}{:+d}): {} valence electrons, valence {}'.format(
                element.full_name, element, formal_charge,
                n_valence_electrons(element, formal_charge),
                valence(element, formal_charge)))
        except AtomTableError as e:
            print('{}: {}'.format(element.full_name, e))

    print('Total mass: {:.4f}'.format(mass))
    print('Mass with 13C label: {:.4f}'.format(
        mass - atomic_weight(Element.C) + atomic_weight(Element.C, 13)))
