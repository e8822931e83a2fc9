"""Module contenant la base pour les exceptions personnalisées de Quizmaster."""

class AppError(Exception):
    """Classe de base pour les exceptions personnalisées de Quizmaster.

    Toutes les exceptions spécifiques à l'application devraient hériter de cette classe.
    Cela permet de capturer et de gérer facilement toutes les exceptions personnalisées en attrapant simplement `AppError`.

    `key` est la clé de message que la couche d'affichage traduit (l'i18n n'est pas gérée ici).
    """

    key: str = "errorUnexpected"
