"""
Reference data for Spanish autonomous communities, provinces and postal codes.
"""

from lrjs_deadline.data.schemas import Comunidad

COMUNIDAD_NAMES = {
    Comunidad.AN: "Andalucía",
    Comunidad.AR: "Aragón",
    Comunidad.AS: "Principado de Asturias",
    Comunidad.CB: "Cantabria",
    Comunidad.CE: "Ceuta",
    Comunidad.CL: "Castilla y León",
    Comunidad.CM: "Castilla-La Mancha",
    Comunidad.CN: "Canarias",
    Comunidad.CT: "Cataluña",
    Comunidad.EX: "Extremadura",
    Comunidad.GA: "Galicia",
    Comunidad.IB: "Illes Balears",
    Comunidad.MC: "Región de Murcia",
    Comunidad.MD: "Comunidad de Madrid",
    Comunidad.ML: "Melilla",
    Comunidad.NC: "Comunidad Foral de Navarra",
    Comunidad.PV: "País Vasco",
    Comunidad.RI: "La Rioja",
    Comunidad.VC: "Comunitat Valenciana",
}

# First two digits of a Spanish postal code are the INE province number.
POSTAL_PREFIXES = {
    "01": Comunidad.PV,  # Araba/Alava
    "02": Comunidad.CM,  # Albacete
    "03": Comunidad.VC,  # Alicante
    "04": Comunidad.AN,  # Almeria
    "05": Comunidad.CL,  # Avila
    "06": Comunidad.EX,  # Badajoz
    "07": Comunidad.IB,  # Illes Balears
    "08": Comunidad.CT,  # Barcelona
    "09": Comunidad.CL,  # Burgos
    "10": Comunidad.EX,  # Caceres
    "11": Comunidad.AN,  # Cadiz
    "12": Comunidad.VC,  # Castellon
    "13": Comunidad.CM,  # Ciudad Real
    "14": Comunidad.AN,  # Cordoba
    "15": Comunidad.GA,  # A Coruna
    "16": Comunidad.CM,  # Cuenca
    "17": Comunidad.CT,  # Girona
    "18": Comunidad.AN,  # Granada
    "19": Comunidad.CM,  # Guadalajara
    "20": Comunidad.PV,  # Gipuzkoa
    "21": Comunidad.AN,  # Huelva
    "22": Comunidad.AR,  # Huesca
    "23": Comunidad.AN,  # Jaen
    "24": Comunidad.CL,  # Leon
    "25": Comunidad.CT,  # Lleida
    "26": Comunidad.RI,  # La Rioja
    "27": Comunidad.GA,  # Lugo
    "28": Comunidad.MD,  # Madrid
    "29": Comunidad.AN,  # Malaga
    "30": Comunidad.MC,  # Murcia
    "31": Comunidad.NC,  # Navarra
    "32": Comunidad.GA,  # Ourense
    "33": Comunidad.AS,  # Asturias
    "34": Comunidad.CL,  # Palencia
    "35": Comunidad.CN,  # Las Palmas
    "36": Comunidad.GA,  # Pontevedra
    "37": Comunidad.CL,  # Salamanca
    "38": Comunidad.CN,  # Santa Cruz de Tenerife
    "39": Comunidad.CB,  # Cantabria
    "40": Comunidad.CL,  # Segovia
    "41": Comunidad.AN,  # Sevilla
    "42": Comunidad.CL,  # Soria
    "43": Comunidad.CT,  # Tarragona
    "44": Comunidad.AR,  # Teruel
    "45": Comunidad.CM,  # Toledo
    "46": Comunidad.VC,  # Valencia
    "47": Comunidad.CL,  # Valladolid
    "48": Comunidad.PV,  # Bizkaia
    "49": Comunidad.CL,  # Zamora
    "50": Comunidad.AR,  # Zaragoza
    "51": Comunidad.CE,  # Ceuta
    "52": Comunidad.ML,  # Melilla
}

# Keys are lower-case and without accents.
PLACE_NAME_MAPPING = {
    # Communities
    "andalucia": Comunidad.AN,
    "aragon": Comunidad.AR,
    "asturias": Comunidad.AS,
    "principado de asturias": Comunidad.AS,
    "cantabria": Comunidad.CB,
    "ceuta": Comunidad.CE,
    "castilla y leon": Comunidad.CL,
    "castilla-la mancha": Comunidad.CM,
    "castilla la mancha": Comunidad.CM,
    "canarias": Comunidad.CN,
    "islas canarias": Comunidad.CN,
    "cataluna": Comunidad.CT,
    "catalunya": Comunidad.CT,
    "extremadura": Comunidad.EX,
    "galicia": Comunidad.GA,
    "illes balears": Comunidad.IB,
    "islas baleares": Comunidad.IB,
    "baleares": Comunidad.IB,
    "region de murcia": Comunidad.MC,
    "comunidad de madrid": Comunidad.MD,
    "melilla": Comunidad.ML,
    "navarra": Comunidad.NC,
    "nafarroa": Comunidad.NC,
    "comunidad foral de navarra": Comunidad.NC,
    "pais vasco": Comunidad.PV,
    "euskadi": Comunidad.PV,
    "la rioja": Comunidad.RI,
    "comunitat valenciana": Comunidad.VC,
    "comunidad valenciana": Comunidad.VC,
    # Provinces and capitals
    "alava": Comunidad.PV,
    "araba": Comunidad.PV,
    "vitoria": Comunidad.PV,
    "vitoria-gasteiz": Comunidad.PV,
    "albacete": Comunidad.CM,
    "alicante": Comunidad.VC,
    "alacant": Comunidad.VC,
    "almeria": Comunidad.AN,
    "avila": Comunidad.CL,
    "badajoz": Comunidad.EX,
    "merida": Comunidad.EX,
    "palma": Comunidad.IB,
    "palma de mallorca": Comunidad.IB,
    "barcelona": Comunidad.CT,
    "burgos": Comunidad.CL,
    "caceres": Comunidad.EX,
    "cadiz": Comunidad.AN,
    "jerez de la frontera": Comunidad.AN,
    "castellon": Comunidad.VC,
    "castello": Comunidad.VC,
    "ciudad real": Comunidad.CM,
    "cordoba": Comunidad.AN,
    "a coruna": Comunidad.GA,
    "la coruna": Comunidad.GA,
    "santiago de compostela": Comunidad.GA,
    "cuenca": Comunidad.CM,
    "girona": Comunidad.CT,
    "gerona": Comunidad.CT,
    "granada": Comunidad.AN,
    "guadalajara": Comunidad.CM,
    "gipuzkoa": Comunidad.PV,
    "guipuzcoa": Comunidad.PV,
    "san sebastian": Comunidad.PV,
    "donostia": Comunidad.PV,
    "huelva": Comunidad.AN,
    "huesca": Comunidad.AR,
    "jaen": Comunidad.AN,
    "leon": Comunidad.CL,
    "lleida": Comunidad.CT,
    "lerida": Comunidad.CT,
    "logrono": Comunidad.RI,
    "lugo": Comunidad.GA,
    "madrid": Comunidad.MD,
    "malaga": Comunidad.AN,
    "murcia": Comunidad.MC,
    "cartagena": Comunidad.MC,
    "pamplona": Comunidad.NC,
    "iruna": Comunidad.NC,
    "ourense": Comunidad.GA,
    "orense": Comunidad.GA,
    "oviedo": Comunidad.AS,
    "gijon": Comunidad.AS,
    "palencia": Comunidad.CL,
    "las palmas": Comunidad.CN,
    "las palmas de gran canaria": Comunidad.CN,
    "pontevedra": Comunidad.GA,
    "vigo": Comunidad.GA,
    "salamanca": Comunidad.CL,
    "santa cruz de tenerife": Comunidad.CN,
    "tenerife": Comunidad.CN,
    "santander": Comunidad.CB,
    "segovia": Comunidad.CL,
    "sevilla": Comunidad.AN,
    "seville": Comunidad.AN,
    "soria": Comunidad.CL,
    "tarragona": Comunidad.CT,
    "teruel": Comunidad.AR,
    "toledo": Comunidad.CM,
    "valencia": Comunidad.VC,
    "valladolid": Comunidad.CL,
    "bizkaia": Comunidad.PV,
    "vizcaya": Comunidad.PV,
    "bilbao": Comunidad.PV,
    "zamora": Comunidad.CL,
    "zaragoza": Comunidad.AR,
}
