"""
Fixed lexical tables used by the heuristic frequency scorer.

All tables are immutable: frozensets for word and bigram lists, a read-only
mapping for letter frequencies. Word lists only hold words of the length their
name promises.
"""

from types import MappingProxyType

# English unigram frequency in percent
LETTER_FREQUENCY = MappingProxyType(
    {
        "E": 12.7,
        "T": 9.06,
        "A": 8.17,
        "O": 7.51,
        "I": 6.97,
        "N": 6.75,
        "S": 6.33,
        "H": 6.09,
        "R": 5.99,
        "D": 4.25,
        "L": 4.03,
        "C": 2.78,
        "U": 2.76,
        "M": 2.41,
        "W": 2.36,
        "F": 2.23,
        "G": 2.02,
        "Y": 1.97,
        "P": 1.93,
        "B": 1.29,
        "V": 0.98,
        "K": 0.77,
        "J": 0.15,
        "X": 0.15,
        "Q": 0.1,
        "Z": 0.07,
    }
)

UNKNOWN_LETTER_FREQUENCY = 0.5

VOWELS = frozenset("AEIOU")

# The 30 most common English bigrams
COMMON_BIGRAMS = frozenset(
    """
    TH HE IN ER AN RE ON AT EN ND TI ES OR TE OF
    ED IS IT AL AR ST TO NT NG SE HA AS OU IO LE
    """.split()
)

VERY_COMMON_SHORT_WORDS = frozenset(
    """
    THE AND FOR ARE BUT NOT YOU ALL CAN HER WAS ONE OUR OUT DAY GET HAS HIM
    HIS HOW ITS MAY NEW NOW OLD SEE TWO WAY WHO WHY DID SAY SHE TOO USE OWN
    SAW SET PUT
    TO OF IN IT IS BE AS AT SO WE HE BY OR ON DO IF ME MY UP AN GO NO US AM
    """.split()
)

VERY_COMMON_4_LETTER_WORDS = frozenset(
    """
    HAVE THAT WITH THIS WILL YOUR FROM THEY BEEN CALL COME MADE FIND LONG
    DOWN MAKE MUCH ONLY OVER SUCH TAKE THAN THEM WELL WERE WHEN VERY TIME
    KNOW WORK BACK HAND GOOD YEAR LIFE SAME SOME ALSO THEN MOST BOTH EVEN
    HELP JUST LIKE LOOK MORE NEED PART SEEM SHOW TELL TURN WANT WHAT WORD
    ABLE AREA BEST CASE EACH FACE FACT FEEL FOUR FREE FULL GAVE GIVE GONE
    HEAD HEAR HELD HERE HIGH HOME IDEA INTO KEEP KIND KNEW LAST LATE LEFT
    LESS LINE LIST LIVE LOVE MANY MEAN MIND MOVE MUST NAME NEAR NEXT ONCE
    OPEN PAID PASS PAST PLAN PLAY READ REAL REST SAID SEEN SENT SIDE SOON
    STAY STOP SURE TALK TOLD TOOK TRUE USED WAIT WALK WEEK WENT WIDE WISH
    FIVE BODY BOOK
    """.split()
)

VERY_COMMON_5_LETTER_WORDS = frozenset(
    """
    ABOUT AFTER AGAIN BEING BELOW COULD EVERY FIRST FOUND GOING GREAT GROUP
    HAPPY HOUSE LARGE LATER LEAVE LEVEL LIGHT MIGHT NEVER OTHER PARTY PLACE
    POINT QUITE RIGHT SHALL SINCE SMALL SOUND STAND START STATE STILL STUDY
    THEIR THERE THESE THING THINK THOSE THREE UNDER UNTIL WATER WHERE WHICH
    WHILE WOMAN WORLD WOULD WRITE YEARS YOUNG ABOVE ALONG AMONG BEGIN BLACK
    BRING BUILD CARRY CAUSE CHECK CHILD CLEAR CLOSE OFTEN ORDER PAPER POWER
    EARLY HUMAN LOCAL MAJOR MONEY MONTH NORTH AREAS ASKED BASED BEGAN BOARD
    CASES CHANG CLASS COMES COURT DEATH DOING DRIVE EIGHT ENTRY EXTRA FIELD FINAL
    FORCE FRONT GIVEN GRACE HANDS HEARD HEART HEAVY IDEAS IMAGE ISSUE ITEMS
    JONES KNOWN LANDS LEAST LEGAL LINES LIVED LOOKS MAKES MARCH MEANS MODEL
    MOVED MUSIC NAMED NEEDS NIGHT NOTES OFFER PEACE PETER PHONE PIECE PLANS
    PLAYS PRICE RANGE REACH READY RIVER ROUND ROYAL SCALE SCENE SENSE SERVE
    SEVEN SHARE SHORT SHOWN SIDES SITES SIXTH SMITH SOUTH SPACE SPEAK SPENT
    SPORT STAFF STAGE STARS STEPS STOCK STONE STOOD STORE STORY STUFF STYLE
    TABLE TAKEN TERMS TEXAS THANK TITLE TODAY TOTAL TOUCH TOWER TRACK TRADE
    TRAIN TREAT TRIED TRIES TRUTH TWICE TYPES UNION UNITS USING VALUE VIDEO
    VISIT VOICE WATCH WEEKS WHITE WHOLE WOMEN WORDS WORKS WORSE WORTH WRONG
    WROTE
    """.split()
)

# NYT / WaPo mini favourites
CROSSWORD_NAMES_4 = frozenset(
    """
    ADAM ALAN ALEX ANNA ANNE ARLO BEAU CARL DANA DEAN EDEN ELLA EMMA ERIC
    ERIN EVAN EZRA FRED GAGA HANK JAKE JANE JEAN JOAN JOHN JUNO KATE KYLO
    LEIA LIAM LILY LISA LOKI LUNA MARY MAYA MILA NEIL NEMO NOAH NORA OLAF
    OWEN PAUL REBA ROSA RYAN SAGE SARA THOR TINA TONY VERA YODA ZARA ZOEY
    THEO ARYA JADE RUBY ELSA DOJA WREN
    """.split()
)

CROSSWORD_NAMES_5 = frozenset(
    """
    ADELE ALICE ARIEL ATLAS BARRY BILLY BRIAN BRUCE CAROL CHLOE CLARA DEREK
    DIANA DYLAN ELENA ELLEN ELTON EMILY FELIX GAVIN GRACE HALEY HARRY HELEN
    HENRY HOMER IRENE JAMES JAMIE JASON JENNY JERRY JIMMY JONAS JULIA KAREN
    KEVIN LAURA LEWIS LIZZO LOGAN LORDE LOUIS LUCAS MARIA MASON MILES MOLLY
    NAOMI NANCY OBAMA OLIVE OPRAH OSCAR PARIS PETER QUINN RALPH REESE RILEY
    ROGER SARAH SOFIA STEVE TYLER VENUS WANDA
    """.split()
)

# Tech, brands and pop culture
MODERN_TERMS_4 = frozenset(
    """
    APPS BLOG BOBA COLA DELI ECHO ETSY ESPN FIFA GRAM HULU IKEA IMAX IMHO
    JPEG LEGO LYFT MEME NCAA RING ROKU ROTI SIRI SLAW SNAP SODA TACO TOFU
    TUNA TTYL UBER VIBE VISA WIFI WNBA YELP YOGA YOLO YUZU ZOOM OAHU RIGA
    FOMO GOAT STAN
    """.split()
)

MODERN_TERMS_5 = frozenset(
    """
    ALEXA ASANA ANIME BAGEL BASIC BINGE BRAND BRAVO CACAO COACH EMAIL EMOJI
    EXTRA GMAIL GUAVA INBOX LATTE LOGIN MANGO MOCHI MOCHA NACHO PALEO PANKO
    PASTA PEPSI PIXEL PIZZA RAMEN SALSA SALTY SHARE SUSHI SWIPE TAPAS TESLA
    TWEET VEGAN VENMO VIDEO VIRAL VODKA AUDIO PENNE KEFIR
    """.split()
)
