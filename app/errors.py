"""Hierarchie d'exceptions EV Catalog.

Regles :
  - Ne jamais utiliser ``except Exception`` nu. Toujours attraper un type specifique.
  - Le constructeur de requete ne leve jamais les FilterQueryError : il les
    retourne. C'est le service qui decide de lever celles qui rejettent la requete.
"""


class EVCatalogError(Exception):
    """Exception de base pour toutes les erreurs EV Catalog."""


class CarNotFoundError(EVCatalogError):
    """Aucune voiture ne correspond a l'identifiant demande."""

    def __init__(self, car_id: int):
        super().__init__(f"Voiture {car_id} introuvable.")
        self.car_id = car_id


class CsvImportError(EVCatalogError):
    """Le fichier CSV est introuvable ou illisible."""


class FilterQueryError(EVCatalogError):
    """Un filtre (ou le payload de filtres) n'a pas passe la validation.

    Attributs :
        index: Position du filtre dans la liste recue (None si payload global).
        column: Colonne demandee par l'appelant, telle que recue.
        operator: Operateur demande par l'appelant, tel que recu.
        rejects_request: True si l'erreur doit faire echouer toute la requete.
        code: Code d'erreur expose dans l'enveloppe JSON.
    """

    rejects_request = True
    code = "INVALID_FILTER"

    def __init__(
        self,
        message: str,
        index: int | None = None,
        column: str | None = None,
        operator: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.column = column
        self.operator = operator

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "message": str(self),
            "index": self.index,
            "column": self.column,
            "operator": self.operator,
        }


class UnknownColumnError(FilterQueryError):
    """Le filtre vise une colonne hors de la liste autorisee."""

    code = "UNKNOWN_COLUMN"


class UnknownOperatorError(FilterQueryError):
    """Operateur inconnu : la clause est ignoree, la requete continue."""

    rejects_request = False
    code = "UNKNOWN_OPERATOR"


class ValueTypeError(FilterQueryError):
    """La valeur ne convient pas a l'operateur (ex. comparaison non numerique)."""

    code = "INVALID_VALUE"


class MissingValueError(ValueTypeError):
    """L'operateur exige une valeur et aucune n'a ete fournie."""


class MalformedFilterPayloadError(FilterQueryError):
    """Le parametre filters n'est pas un tableau JSON exploitable.

    La liste de filtres est alors traitee comme vide.
    """

    rejects_request = False
    code = "MALFORMED_FILTERS"
