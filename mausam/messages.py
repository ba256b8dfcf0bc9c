from mausam.config import resolve_language

MESSAGES = {
    "hi": {
        "title": "मौसम जानकारी",
        "city_label": "शहर का नाम",
        "city_placeholder": "जैसे: जयपुर",
        "button": "Get Weather",
        "button_loading": "लोड हो रहा है…",
        "status_empty_city": "कृपया शहर का नाम दर्ज करें।",
        "status_loading": "मौसम जानकारी प्राप्त की जा रही है…",
        "status_success": "{name}, {country} के लिए ताज़ा मौसम डेटा।",
        "status_failure": "क्षमा करें, मौसम जानकारी प्राप्त नहीं हो सकी। कृपया बाद में पुनः प्रयास करें।",
        "label_temperature": "तापमान",
        "label_humidity": "आर्द्रता",
        "label_rain_chance": "वर्षा की संभावना",
        "label_advice": "मौसम सलाह",
        "season_spring_summer": "वसंत से गर्मी",
        "season_monsoon": "मानसून",
        "season_autumn": "शरद",
        "season_winter": "ठंड का मौसम",
        "advice_season": "यह {season} का दौर है।",
        "advice_temp_hot": "तेज़ धूप से बचने के लिए हल्के कपड़े पहनें और पर्याप्त पानी पिएँ।",
        "advice_temp_cold": "गरम कपड़े पहनें और ठंडी हवाओं से खुद को ढँक कर रखें।",
        "advice_temp_warm": "हल्का और आरामदायक पहनावा चुनें तथा ठंडे पेय पदार्थ लें।",
        "advice_temp_mild": "तापमान आरामदायक है, सामान्य दिनचर्या जारी रखें।",
        "advice_humidity_high": "उच्च आर्द्रता के कारण पसीना अधिक हो सकता है, ठंडा रहने के उपाय करें।",
        "advice_humidity_low": "हवा शुष्क है, त्वचा को मॉइस्चराइज़ रखें और पानी पिएँ।",
        "advice_rain_likely": "बारिश की प्रबल संभावना है, छाता या रेनकोट साथ रखें।",
        "advice_rain_possible": "हल्की फुहारें पड़ सकती हैं, सतर्क रहें।",
        "advice_rain_low": "वर्षा की संभावना कम है, मौसम सुहाना रहेगा।",
    },
    "en": {
        "title": "Weather lookup",
        "city_label": "City name",
        "city_placeholder": "e.g. Jaipur",
        "button": "Get Weather",
        "button_loading": "Loading…",
        "status_empty_city": "Please enter a city name.",
        "status_loading": "Fetching weather information…",
        "status_success": "Latest weather data for {name}, {country}.",
        "status_failure": "Sorry, weather information could not be retrieved. Please try again later.",
        "label_temperature": "Temperature",
        "label_humidity": "Humidity",
        "label_rain_chance": "Chance of rain",
        "label_advice": "Weather advice",
        "season_spring_summer": "spring into summer",
        "season_monsoon": "monsoon",
        "season_autumn": "autumn",
        "season_winter": "cold",
        "advice_season": "This is the {season} season.",
        "advice_temp_hot": "Wear light clothing to beat the strong sun and drink plenty of water.",
        "advice_temp_cold": "Wear warm clothes and cover up against the cold wind.",
        "advice_temp_warm": "Choose light, comfortable clothing and have cool drinks.",
        "advice_temp_mild": "The temperature is comfortable, carry on with your usual routine.",
        "advice_humidity_high": "High humidity may cause heavy sweating, take steps to stay cool.",
        "advice_humidity_low": "The air is dry, keep your skin moisturised and drink water.",
        "advice_rain_likely": "Rain is very likely, carry an umbrella or raincoat.",
        "advice_rain_possible": "Light showers are possible, stay alert.",
        "advice_rain_low": "Rain is unlikely, the weather should stay pleasant.",
    },
}


def message(key: str, language: str | None = None, **kwargs) -> str:
    """
    Look up a user-facing string, falling back to Hindi for keys a
    catalog is missing.
    """
    catalog = MESSAGES[resolve_language(language)]
    template = catalog.get(key)
    if template is None:
        template = MESSAGES["hi"][key]
    return template.format(**kwargs) if kwargs else template
