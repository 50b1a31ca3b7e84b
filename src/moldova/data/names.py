"""Given names and surnames with per-language spellings.

Each row of the embedded tables lists one name across :data:`LANGUAGES`, in
column order.  A ``-`` marks a language with no established spelling; lookups
for that language fall back to the English spelling.  Surname rows pair
occupational and descriptive surnames with their usual equivalents.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

ENGLISH = "english"
SPANISH = "spanish"
FRENCH = "french"
GERMAN = "german"
ITALIAN = "italian"
PORTUGUESE = "portuguese"
DUTCH = "dutch"

LANGUAGES: tuple[str, ...] = (ENGLISH, SPANISH, FRENCH, GERMAN, ITALIAN, PORTUGUESE, DUTCH)
DEFAULT_LANGUAGE = ENGLISH


@dataclass(slots=True, frozen=True)
class Name:
    """A single name and its spellings keyed by language."""

    spellings: Mapping[str, str]

    def spelling(self, language: str) -> str:
        """Return the spelling for ``language`` or the English one."""

        return self.spellings.get(language) or self.spellings[DEFAULT_LANGUAGE]


def _parse_table(table: str) -> tuple[Name, ...]:
    names: list[Name] = []
    for line in table.strip().splitlines():
        cells = line.split()
        if len(cells) != len(LANGUAGES):
            raise ValueError(f"name row has {len(cells)} cells: {line!r}")
        spellings = {lang: cell for lang, cell in zip(LANGUAGES, cells) if cell != "-"}
        names.append(Name(MappingProxyType(spellings)))
    return tuple(names)


# english spanish french german italian portuguese dutch
_FIRST_NAMES = """
John Juan Jean Johann Giovanni João Jan
Mary María Marie Maria Maria Maria Maria
Peter Pedro Pierre Peter Pietro Pedro Pieter
Paul Pablo Paul Paul Paolo Paulo Paul
James Diego Jacques Jakob Giacomo Tiago Jacob
Joseph José Joseph Josef Giuseppe José Jozef
Michael Miguel Michel Michael Michele Miguel Michiel
William Guillermo Guillaume Wilhelm Guglielmo Guilherme Willem
Charles Carlos Charles Karl Carlo Carlos Karel
Henry Enrique Henri Heinrich Enrico Henrique Hendrik
Thomas Tomás Thomas Thomas Tommaso Tomás Thomas
Andrew Andrés André Andreas Andrea André Andries
Stephen Esteban Étienne Stefan Stefano Estêvão Stefan
Matthew Mateo Matthieu Matthias Matteo Mateus Matthijs
Anthony Antonio Antoine Anton Antonio António Antoon
Francis Francisco François Franz Francesco Francisco Frans
George Jorge Georges Georg Giorgio Jorge Joris
Lawrence Lorenzo Laurent Lorenz Lorenzo Lourenço Laurens
Robert Roberto Robert Robert Roberto Roberto Robert
Richard Ricardo Richard Richard Riccardo Ricardo Richard
Edward Eduardo Édouard Eduard Edoardo Eduardo Eduard
Louis Luis Louis Ludwig Luigi Luís Lodewijk
Frederick Federico Frédéric Friedrich Federico Frederico Frederik
Martin Martín Martin Martin Martino Martim Maarten
Nicholas Nicolás Nicolas Nikolaus Nicola Nicolau Nicolaas
Christopher Cristóbal Christophe Christoph Cristoforo Cristóvão Christoffel
Alexander Alejandro Alexandre Alexander Alessandro Alexandre Alexander
Daniel Daniel Daniel Daniel Daniele Daniel Daniël
David David David David Davide David David
Samuel Samuel Samuel Samuel Samuele Samuel Samuel
Anne Ana Anne Anna Anna Ana Anna
Elizabeth Isabel Élisabeth Elisabeth Elisabetta Isabel Elisabeth
Catherine Catalina Catherine Katharina Caterina Catarina Catharina
Margaret Margarita Marguerite Margarete Margherita Margarida Margriet
Helen Elena Hélène Helene Elena Helena Helena
Jane Juana Jeanne Johanna Giovanna Joana Johanna
Susan Susana Suzanne Susanne Susanna Susana Suzanne
Teresa Teresa Thérèse Theresa Teresa Teresa Theresia
Sophia Sofía Sophie Sophie Sofia Sofia Sofie
Lucy Lucía Lucie Luzia Lucia Lúcia Lucia
Frances Francisca Françoise Franziska Francesca Francisca Francisca
Caroline Carolina Caroline Karoline Carolina Carolina Caroline
Christine Cristina Christine Christine Cristina Cristina Christine
Julia Julia Julie Julia Giulia Júlia Julia
Clare Clara Claire Klara Chiara Clara Klara
Rose Rosa Rose Rosa Rosa Rosa Roos
Agnes Inés Agnès Agnes Agnese Inês Agnes
Josephine Josefina Joséphine Josephine Giuseppina Josefina Josefien
Emily Emilia Émilie Emilie Emilia Emília Emilie
Victoria Victoria Victoire Viktoria Vittoria Vitória Victoria
Alice Alicia Alice Alice Alice Alice Alice
Emma - Emma Emma Emma Ema Emma
Oliver - Olivier Oliver Oliviero - Olivier
Noah - Noé Noah Noè Noé Noah
Liam - - - - - -
Olivia Olivia Olivia Olivia Olivia Olívia Olivia
Mia Mía Mia Mia Mia Mia Mia
Ethan - - - - - -
Grace Graciela Grâce - Grazia Graça -
"""

# english spanish french german italian portuguese dutch
_LAST_NAMES = """
Smith Herrero Lefebvre Schmidt Ferrari Ferreira Smit
Miller Molinero Meunier Müller Molinari Moleiro Molenaar
Baker Panadero Boulanger Becker Fornaro Padeiro Bakker
Taylor Sastre Tailleur Schneider Sarto Alfaiate Kleermaker
Carpenter Carpintero Charpentier Zimmermann Carpentieri Carpinteiro Timmerman
Shepherd Pastor Berger Schäfer Pastore Pastor Schaap
Fisher Pescador Pêcheur Fischer Pescatore Pescador Visser
Hunter Cazador Chasseur Jäger Cacciatore Caçador Jager
Cook Cocinero Cuisinier Koch Cuoco Cozinheiro Kok
Wheeler Carretero Charron Wagner Carraro Carreiro Wagenaar
Potter Alfarero Potier Töpfer Vasaio Oleiro Pottebakker
Mason Cantero Maçon Steinmetz Muratori Pedreiro Metselaar
Weaver Tejedor Tisserand Weber Tessitore Tecelão Wever
Fletcher Flechero Flèche Pfeilmacher Frecciaro Flecheiro Pijlmaker
Cooper Tonelero Tonnelier Böttcher Bottaio Tanoeiro Kuiper
Brewer Cervecero Brasseur Brauer Birraio Cervejeiro Brouwer
Gardener Jardinero Jardinier Gärtner Giardini Jardineiro Hovenier
Farmer Granjero Fermier Bauer Contadino Lavrador Boer
King Rey Roy König Re Rei Koning
Bishop Obispo Lévêque Bischof Vescovo Bispo Bisschop
Knight Caballero Chevalier Ritter Cavaliere Cavaleiro Ridder
Stone Piedra Pierre Stein Pietra Pedra Steen
Wood Bosque Dubois Holz Bosco Bosque Houtman
Hill Cuesta Colline Hügel Colle Monte Heuvel
Rivers Ríos Rivière Fluss Fiume Rios Rivier
Brooks Arroyo Ruisseau Bach Ruscello Ribeiro Beek
Fields Campos Deschamps Feld Campi Campos Veld
Green Verde Vert Grün Verdi Verde Groen
Brown Moreno Lebrun Braun Bruno Moreno Bruin
White Blanco Leblanc Weiss Bianchi Branco Wit
Black Negro Lenoir Schwarz Neri Preto Zwart
Gray Gris Legris Grau Grigio Cinza Grijs
Young Joven Lejeune Jung Giovane Jovem Jong
Long Largo Lelong Lang Longo Longo Lang
Short Bajo Lecourt Kurz Corti Curto Kort
Newman Nuevo Nouvel Neumann Nuovo Novo Nieuwenhuis
Fox Zorro Renard Fuchs Volpe Raposo Vos
Wolf Lobo Leloup Wolf Lupo Lobo Wolf
Bird Pájaro Loiseau Vogel Uccello Pássaro Vogel
Lamb Cordero Lagneau Lamm Agnello Cordeiro Lam
Bell Campana Cloche Glocke Campana Sino Klok
Castle Castillo Château Burg Castello Castelo Kasteel
Church Iglesia Église Kirch Chiesa Igreja Kerk
Bridge Puente Dupont Brück Ponte Ponte Brug
Wells Fuentes Fontaine Brunnen Fontana Fontes Bron
Martin Martín Martin Martin Martini Martins Martens
Johnson - - Johannsen - - Janssen
Peters Pérez Pierre Peters Pietri Peres Pieters
Williams Guillén Guillaume Wilhelm Guglielmi Guilherme Willems
Rogers Rodríguez Roger Rüdiger Ruggeri Rodrigues Rutgers
Garcia García - - - Garcia -
Rossi - - - Rossi - -
Dubois - Dubois - - - -
"""

FIRST_NAMES: tuple[Name, ...] = _parse_table(_FIRST_NAMES)
LAST_NAMES: tuple[Name, ...] = _parse_table(_LAST_NAMES)

__all__ = [
    "Name",
    "LANGUAGES",
    "DEFAULT_LANGUAGE",
    "ENGLISH",
    "SPANISH",
    "FRENCH",
    "GERMAN",
    "ITALIAN",
    "PORTUGUESE",
    "DUTCH",
    "FIRST_NAMES",
    "LAST_NAMES",
]
