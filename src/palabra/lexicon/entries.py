"""Curated Spanish-English word table.

Keys are normalized single words (no accents, lowercase, no punctuation),
except PHRASES whose keys keep their accents and are matched verbatim.
Values are a single English gloss or an ordered list of candidates; the
first candidate is the default sense when context does not decide.

Accent homographs share one key (``el``/``él``, ``como``/``cómo``,
``si``/``sí``), so their senses appear together in one candidate list.
There is no lemmatization: each conjugated form is its own entry.
"""

from __future__ import annotations

# Articles, determiners and quantifiers
DETERMINERS: dict[str, str | list[str]] = {
    "el": ["the", "he", "him"],
    "la": ["the", "her", "it"],
    "los": ["the", "them"],
    "las": ["the", "them"],
    "lo": ["it", "him", "the"],
    "un": ["a", "an", "one"],
    "una": ["a", "an", "one"],
    "unos": ["some", "certain"],
    "unas": ["some", "certain"],
    "al": ["to the", "unto the"],
    "del": ["of the", "from the"],
    "este": ["this", "east"],
    "esta": ["this", "is"],
    "estos": "these",
    "estas": ["these", "are"],
    "ese": "that",
    "esa": "that",
    "esos": "those",
    "esas": "those",
    "aquel": "that",
    "aquella": "that",
    "aquellos": "those",
    "aquellas": "those",
    "todo": ["all", "every", "whole"],
    "toda": ["all", "every", "whole"],
    "todos": ["all", "every"],
    "todas": ["all", "every"],
    "cada": ["every", "each"],
    "alguno": ["any", "some"],
    "algunos": ["some", "certain"],
    "ninguno": ["none", "no"],
    "ninguna": ["none", "no"],
    "otro": ["other", "another"],
    "otra": ["other", "another"],
    "otros": ["others", "other"],
    "otras": ["others", "other"],
    "mismo": ["same", "himself", "self"],
    "misma": ["same", "herself", "self"],
    "mucho": ["much", "many", "great"],
    "mucha": ["much", "great"],
    "muchos": ["many", "much"],
    "muchas": ["many", "much"],
    "poco": ["little", "few"],
    "pocos": "few",
    "tanto": ["so much", "so", "as much"],
    "tal": "such",
    "cual": ["which", "whom"],
    "cuales": ["which", "whom"],
}

# Personal, possessive and relative pronouns
PRONOUNS: dict[str, str | list[str]] = {
    "yo": "I",
    "tu": ["thy", "thou", "your", "you"],
    "ella": ["she", "her"],
    "ello": "it",
    "nosotros": ["we", "us"],
    "vosotros": ["ye", "you"],
    "ellos": ["they", "them"],
    "ellas": ["they", "them"],
    "usted": "you",
    "ustedes": "you",
    "me": "me",
    "te": ["thee", "you"],
    "se": ["himself", "themselves", "itself", "herself"],
    "nos": "us",
    "os": ["you", "ye"],
    "le": ["him", "her", "unto him"],
    "les": ["them", "unto them"],
    "mi": ["my", "me", "mine"],
    "mis": "my",
    "ti": ["thee", "you"],
    "tus": ["thy", "your"],
    "su": ["his", "her", "their", "its"],
    "sus": ["his", "their", "her"],
    "nuestro": "our",
    "nuestra": "our",
    "nuestros": "our",
    "nuestras": "our",
    "vuestro": "your",
    "vuestra": "your",
    "vuestros": "your",
    "mio": "mine",
    "mia": "mine",
    "tuyo": ["thine", "yours"],
    "suyo": ["his", "theirs"],
    "conmigo": "with me",
    "contigo": "with thee",
    "que": ["that", "which", "what", "who"],
    "quien": ["who", "whom", "he that"],
    "quienes": ["who", "whom"],
    "esto": "this",
    "eso": "that",
    "aquello": "that",
    "alguien": ["someone", "any man"],
    "nadie": ["no one", "no man", "none"],
    "algo": ["something", "aught"],
    "nada": ["nothing", "nought"],
}

# Prepositions
PREPOSITIONS: dict[str, str | list[str]] = {
    "a": ["to", "unto", "at"],
    "ante": ["before", "in the presence of"],
    "bajo": ["under", "beneath"],
    "con": "with",
    "contra": "against",
    "de": ["of", "from"],
    "desde": "from",
    "en": ["in", "on", "into", "upon"],
    "entre": ["among", "between"],
    "hacia": ["toward", "towards"],
    "hasta": ["until", "unto", "even"],
    "para": ["for", "to", "that"],
    "por": ["by", "for", "through"],
    "segun": "according to",
    "sin": "without",
    "sobre": ["upon", "over", "on", "above"],
    "tras": "after",
    "dentro": "within",
    "fuera": ["out", "outside", "without"],
    "delante": "before",
    "detras": "behind",
    "encima": "above",
    "debajo": "beneath",
    "cerca": ["near", "nigh"],
    "lejos": ["far", "afar"],
    "junto": ["beside", "together"],
    "alrededor": ["about", "round about"],
}

# Conjunctions, adverbs and interrogatives
CONNECTIVES: dict[str, str | list[str]] = {
    "y": "and",
    "e": "and",
    "o": "or",
    "u": "or",
    "ni": ["neither", "nor"],
    "pero": "but",
    "mas": ["but", "more"],
    "sino": "but",
    "porque": ["because", "for"],
    "pues": ["for", "then", "therefore"],
    "si": ["if", "yes", "himself"],
    "aunque": ["although", "though"],
    "como": ["like", "as", "how"],
    "cuando": "when",
    "donde": ["where", "whither"],
    "adonde": ["whither", "where"],
    "mientras": "while",
    "entonces": "then",
    "luego": ["then", "later"],
    "asi": ["so", "thus"],
    "tambien": "also",
    "ademas": ["besides", "moreover"],
    "incluso": "even",
    "aun": ["even", "yet", "still"],
    "ya": ["already", "now"],
    "ahora": "now",
    "hoy": ["today", "this day"],
    "ayer": "yesterday",
    "manana": ["tomorrow", "morning"],
    "siempre": ["always", "ever"],
    "nunca": "never",
    "jamas": ["never", "ever"],
    "antes": "before",
    "despues": "after",
    "aqui": "here",
    "ahi": "there",
    "alli": "there",
    "alla": "there",
    "no": ["not", "no"],
    "tampoco": ["neither", "nor"],
    "muy": ["very", "exceeding"],
    "menos": "less",
    "bien": ["well", "good"],
    "mal": ["evil", "bad"],
    "solo": ["only", "alone"],
    "solamente": "only",
    "verdaderamente": ["verily", "truly"],
    "he": ["behold", "lo"],
    "cuanto": ["how much", "as much"],
    "cuantos": ["how many", "as many"],
}

# Verb forms (no lemmatization; each form is its own entry)
VERBS: dict[str, str | list[str]] = {
    # ser / estar
    "ser": "be",
    "soy": "am",
    "eres": ["art", "are"],
    "es": "is",
    "somos": "are",
    "sois": "are",
    "son": "are",
    "era": "was",
    "eran": "were",
    "fue": ["was", "went"],
    "fueron": ["were", "went"],
    "sera": ["shall be", "will be"],
    "seran": ["shall be", "will be"],
    "sea": ["be", "let there be"],
    "sean": ["be", "let them be"],
    "estar": "be",
    "estoy": "am",
    "estan": "are",
    "estaba": "was",
    "estaban": "were",
    "estuvo": "was",
    # haber / tener
    "haber": "have",
    "ha": ["hath", "has"],
    "han": "have",
    "has": ["hast", "have"],
    "hemos": "have",
    "habia": ["there was", "had"],
    "habian": ["there were", "had"],
    "hubo": ["there was", "there were"],
    "hay": ["there is", "there are"],
    "tener": "have",
    "tengo": "have",
    "tiene": ["hath", "has"],
    "tienen": "have",
    "tenia": "had",
    "tuvo": "had",
    # creation narrative
    "crear": "create",
    "creo": ["created", "believe"],
    "creado": "created",
    "creados": "created",
    "creyo": "believed",
    "creer": "believe",
    "cree": ["believeth", "believes"],
    "creen": "believe",
    "dijo": "said",
    "dijeron": "said",
    "dice": ["saith", "says"],
    "dicen": ["say", "said"],
    "decir": "say",
    "digo": "say",
    "hizo": "made",
    "hicieron": "made",
    "hacer": ["do", "make"],
    "hago": ["do", "make"],
    "hace": ["doeth", "does", "makes"],
    "hecho": ["made", "done"],
    "hagamos": "make",
    "vio": "saw",
    "vieron": "saw",
    "ver": "see",
    "veo": "see",
    "visto": "seen",
    "separo": "divided",
    "llamo": "called",
    "llamaron": "called",
    "llamado": "called",
    "bendijo": "blessed",
    "bendito": "blessed",
    "descanso": "rested",
    "produzca": "bring forth",
    "produjo": "brought",
    "multiplicaos": "multiply",
    "fructificad": "be fruitful",
    "llenad": "fill",
    "sojuzgadla": "subdue",
    "senoread": "have dominion",
    "haya": ["let there be", "be"],
    "movia": "moved",
    # motion and speech
    "ir": "go",
    "voy": "go",
    "va": ["goeth", "goes"],
    "van": "go",
    "id": "go",
    "venir": "come",
    "vengo": "come",
    "viene": ["cometh", "comes"],
    "vino": ["came", "wine"],
    "vinieron": "came",
    "ven": ["come", "see"],
    "venid": "come",
    "salio": ["went out", "went"],
    "salieron": ["went out", "went"],
    "entro": ["entered", "went"],
    "entraron": ["entered", "went"],
    "subio": ["went up", "ascended"],
    "descendio": ["came down", "descended"],
    "hablo": ["spake", "spoke"],
    "hablar": ["speak", "talk"],
    "respondio": "answered",
    "respondieron": "answered",
    "oir": "hear",
    "oyo": "heard",
    "oyeron": "heard",
    "oid": "hear",
    "escrito": "written",
    "mando": ["commanded", "sent"],
    "envio": "sent",
    "dio": "gave",
    "dar": "give",
    "doy": "give",
    "da": ["giveth", "gives"],
    "dado": "given",
    "dad": "give",
    "tomo": "took",
    "tomar": "take",
    "puso": ["put", "set"],
    # devotional verbs
    "amar": "love",
    "amo": "love",
    "ama": ["loveth", "loves"],
    "amaras": "love",
    "amad": "love",
    "amado": "beloved",
    "salvar": "save",
    "salvo": ["saved", "save"],
    "perdonar": "forgive",
    "perdona": "forgive",
    "perdonados": "forgiven",
    "orar": "pray",
    "oro": ["prayed", "gold"],
    "alabad": "praise",
    "alabar": "praise",
    "alabanza": "praise",
    "bendecid": "bless",
    "bendice": "bless",
    "temer": "fear",
    "temed": "fear",
    "teme": ["feareth", "fears"],
    "guardar": "keep",
    "guarda": ["keepeth", "keep"],
    "guardad": "keep",
    "vivir": "live",
    "vive": ["liveth", "lives"],
    "vivira": "shall live",
    "morir": "die",
    "murio": "died",
    "muere": "dieth",
    "resucito": ["rose", "risen"],
    "seguir": "follow",
    "seguid": "follow",
    "sigueme": "follow me",
    "conocer": "know",
    "conozco": "know",
    "conoce": ["knoweth", "knows"],
    "conocio": "knew",
    "saber": "know",
    "sabe": ["knoweth", "knows"],
    "sabeis": "know",
    "buscar": "seek",
    "buscad": "seek",
    "busca": "seeketh",
    "hallar": "find",
    "hallo": "found",
    "hallareis": "shall find",
    "pedid": "ask",
    "pedir": "ask",
    "llamad": "knock",
    "abrira": "shall be opened",
    "reino": ["kingdom", "reigned"],
    "reinara": "shall reign",
    "pastorea": ["shepherd", "leadeth"],
    "faltara": "shall want",
    "confortara": "restoreth",
    "guiara": "leadeth",
    "andar": "walk",
    "anduvo": "walked",
    "andad": "walk",
    "anda": ["walketh", "walks"],
    "pecar": "sin",
    "peco": "sinned",
    "pecaron": "sinned",
    "amen": "amen",
}

# Nouns of scripture: deity, liturgy, people, nature, time
NOUNS: dict[str, str | list[str]] = {
    "dios": "God",
    "senor": ["Lord", "lord", "master"],
    "jehova": ["LORD", "Lord"],
    "jesus": "Jesus",
    "cristo": "Christ",
    "jesucristo": "Jesus Christ",
    "espiritu": ["Spirit", "spirit", "ghost"],
    "padre": "Father",
    "hijo": "Son",
    "hijos": ["children", "sons"],
    "hija": "daughter",
    "hijas": "daughters",
    "madre": "mother",
    "hermano": "brother",
    "hermanos": "brethren",
    "hombre": "man",
    "hombres": "men",
    "mujer": ["woman", "wife"],
    "mujeres": ["women", "wives"],
    "varon": "man",
    "nino": ["child", "babe"],
    "ninos": "children",
    "pueblo": "people",
    "pueblos": ["nations", "people"],
    "naciones": "nations",
    "rey": "king",
    "reyes": "kings",
    "sacerdote": "priest",
    "sacerdotes": "priests",
    "profeta": "prophet",
    "profetas": "prophets",
    "discipulos": "disciples",
    "apostol": "apostle",
    "apostoles": "apostles",
    "angel": "angel",
    "angeles": "angels",
    "siervo": "servant",
    "siervos": "servants",
    "pastor": "shepherd",
    "ovejas": "sheep",
    "cordero": "lamb",
    "mundo": "world",
    "tierra": "earth",
    "cielo": ["heaven", "sky"],
    "cielos": ["heaven", "heavens"],
    "mar": "sea",
    "mares": "seas",
    "aguas": "waters",
    "agua": "water",
    "rio": "river",
    "monte": ["mount", "mountain"],
    "montes": ["mountains", "hills"],
    "desierto": "wilderness",
    "abismo": "deep",
    "luz": "light",
    "tinieblas": "darkness",
    "oscuridad": "darkness",
    "dia": "day",
    "dias": "days",
    "noche": "night",
    "tarde": "evening",
    "principio": "beginning",
    "fin": "end",
    "tiempo": ["time", "season"],
    "tiempos": "times",
    "ano": "year",
    "anos": "years",
    "sol": "sun",
    "luna": "moon",
    "estrellas": "stars",
    "lumbreras": "lights",
    "expansion": "firmament",
    "firmamento": "firmament",
    "semilla": "seed",
    "simiente": "seed",
    "hierba": ["grass", "herb"],
    "arbol": "tree",
    "arboles": "trees",
    "fruto": "fruit",
    "frutos": "fruits",
    "peces": "fish",
    "aves": "fowl",
    "bestias": "beasts",
    "ganado": "cattle",
    "animales": "animals",
    "imagen": "image",
    "semejanza": "likeness",
    "palabra": "word",
    "palabras": "words",
    "verbo": "Word",
    "vida": "life",
    "muerte": "death",
    "amor": ["love", "charity"],
    "fe": "faith",
    "esperanza": "hope",
    "gracia": "grace",
    "misericordia": "mercy",
    "paz": "peace",
    "gozo": "joy",
    "gloria": "glory",
    "poder": ["power", "might"],
    "verdad": "truth",
    "camino": "way",
    "justicia": "righteousness",
    "pecado": "sin",
    "pecados": "sins",
    "ley": "law",
    "mandamiento": "commandment",
    "mandamientos": "commandments",
    "pacto": "covenant",
    "juicio": "judgment",
    "salvacion": "salvation",
    "corazon": "heart",
    "alma": "soul",
    "carne": "flesh",
    "sangre": "blood",
    "cuerpo": "body",
    "mano": "hand",
    "manos": "hands",
    "ojos": "eyes",
    "boca": "mouth",
    "voz": "voice",
    "nombre": "name",
    "casa": "house",
    "templo": "temple",
    "altar": "altar",
    "ciudad": "city",
    "trono": "throne",
    "reinos": "kingdoms",
    "pan": "bread",
    "cosas": "things",
    "obra": "work",
    "obras": "works",
    "faz": "face",
    "rostro": "face",
    "delicados": "tender",
    "pastos": "pastures",
    "reposar": "lie down",
    "sendas": "paths",
}

# Adjectives and ordinal numbers
ADJECTIVES: dict[str, str | list[str]] = {
    "santo": "holy",
    "santa": "holy",
    "santos": ["saints", "holy"],
    "bueno": "good",
    "buena": "good",
    "buenos": "good",
    "malo": "evil",
    "mala": "evil",
    "grande": "great",
    "grandes": "great",
    "gran": "great",
    "pequeno": ["little", "small"],
    "nuevo": "new",
    "nueva": "new",
    "viejo": "old",
    "eterna": ["everlasting", "eternal"],
    "eterno": ["everlasting", "eternal"],
    "justo": ["righteous", "just"],
    "fiel": "faithful",
    "verdadero": "true",
    "vivo": ["living", "alive"],
    "vivos": "living",
    "muertos": "dead",
    "desordenada": "without form",
    "vacia": "void",
    "unigenito": "only begotten",
    "primero": "first",
    "primer": "first",
    "primera": "first",
    "segundo": "second",
    "tercero": "third",
    "tercer": "third",
    "cuarto": "fourth",
    "quinto": "fifth",
    "sexto": "sixth",
    "septimo": "seventh",
    "octavo": "eighth",
    "noveno": "ninth",
    "decimo": "tenth",
    "ultimo": "last",
    "postrero": "last",
    "uno": "one",
    "dos": "two",
    "tres": "three",
    "cuatro": "four",
    "cinco": "five",
    "seis": "six",
    "siete": "seven",
    "ocho": "eight",
    "nueve": "nine",
    "diez": "ten",
    "doce": "twelve",
    "cuarenta": "forty",
    "cien": "hundred",
    "mil": "thousand",
}

# Multi-word phrases: lowercase, accents kept, matched verbatim
PHRASES: dict[str, str | list[str]] = {
    "tal vez": "maybe",
    "a veces": "sometimes",
    "a menudo": "often",
    "rara vez": "rarely",
    "sin embargo": "however",
    "no obstante": "nevertheless",
    "por lo tanto": "therefore",
    "así que": "so",
    "por qué": "why",
    "he aquí": "behold",
    "será salvo": "shall be saved",
    "en verdad": "verily",
    "de cierto": "verily",
    "para siempre": ["for ever", "forever"],
    "por siempre": ["for ever", "forever"],
    "espíritu santo": "Holy Ghost",
    "hijo del hombre": "Son of man",
    "reino de dios": "kingdom of God",
    "vida eterna": "everlasting life",
}

CURATED_SECTIONS: tuple[dict[str, str | list[str]], ...] = (
    DETERMINERS,
    PRONOUNS,
    PREPOSITIONS,
    CONNECTIVES,
    VERBS,
    NOUNS,
    ADJECTIVES,
    PHRASES,
)
