from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Typology


@dataclass(frozen=True)
class CatalogItem:
    name: str
    unit: str
    category: str
    price: float


TYPOLOGY_BUDGETS: dict[Typology, list[CatalogItem]] = {
    Typology.RESIDENCIAL: [
        CatalogItem("Limpieza y Chapeo", "m2", "Preliminares", 15),
        CatalogItem("Trazo y Estaqueo", "m2", "Preliminares", 25),
        CatalogItem("Excavación Cimiento Corrido", "m3", "Cimentación", 85),
        CatalogItem("Cimiento Corrido 0.40x0.20", "ml", "Cimentación", 350),
        CatalogItem("Solera de Humedad", "ml", "Cimentación", 210),
        CatalogItem("Levantado de Block 0.14 Poma", "m2", "Muros", 145),
        CatalogItem("Losa Prefabricada", "m2", "Cubierta", 380),
        CatalogItem("Piso Cerámico Nacional", "m2", "Acabados", 175),
    ],
    Typology.COMERCIAL: [
        CatalogItem("Demolición de Estructuras", "m3", "Demolición", 120),
        CatalogItem("Columnas de Acero Estructural", "lb", "Estructura", 12),
        CatalogItem("Losa de Entrepiso (Steel Deck)", "m2", "Entrepiso", 550),
        CatalogItem("Fachada Vidrio Templado", "m2", "Fachada", 1400),
    ],
    Typology.INDUSTRIAL: [
        CatalogItem("Pavimento Concreto 4000 PSI", "m2", "Pisos", 450),
        CatalogItem("Estructura Nave Industrial", "kg", "Estructura", 25),
        CatalogItem("Lámina Aluzinc Prepintada", "m2", "Cubierta", 145),
    ],
    Typology.CIVIL: [
        CatalogItem("Base Granular Triturada", "m3", "Mov. Tierras", 280),
        CatalogItem('Asfalto Caliente 3"', "m2", "Pavimento", 195),
        CatalogItem("Bordillo de Concreto", "ml", "Drenaje", 145),
    ],
    Typology.PUBLICA: [
        CatalogItem("Cimentación Edificios Públicos", "m3", "Cimentación", 3200),
        CatalogItem("Baterías de Baños Institucionales", "global", "Instalaciones", 45000),
    ],
}
