"""Static replies of the rule-based assistant, keyed by language.

Each rule is (keywords, reply). Rules are tried in order and the first rule
with a keyword contained in the lowercased message wins.
"""

Rule = tuple[tuple[str, ...], str]

WELCOME: dict[str, str] = {
    "en": "Hello! I'm your welfare scheme assistant. How can I help you today?",
    "hi": "नमस्ते! मैं आपका कल्याण योजना सहायक हूँ। आज मैं आपकी कैसे मदद कर सकता हूँ?",
}

RULES: dict[str, list[Rule]] = {
    "en": [
        (
            ("eligible", "qualify"),
            "To check your eligibility for welfare schemes, I need to know a few details "
            "about you. If you've completed your profile, I can recommend schemes based on "
            "your age, income, location, and other factors. Would you like me to check what "
            "schemes you might be eligible for?",
        ),
        (
            ("pm kisan", "pm-kisan"),
            "To apply for PM Kisan Yojana:\n\n"
            "1. Ensure you're a small or marginal farmer\n"
            "2. Prepare documents: Aadhaar card, land records, bank account details\n"
            "3. Register through our application portal\n"
            "4. Upload required documents\n"
            "5. Submit your application\n\n"
            "You can track the status of your application through the My Applications section.",
        ),
        (
            ("ayushman bharat", "pmjay"),
            "For Ayushman Bharat (PMJAY), the following documents are needed:\n\n"
            "1. Aadhaar Card\n"
            "2. Ration Card\n"
            "3. Income Certificate\n"
            "4. Recent passport-sized photograph\n"
            "5. Proof of residence\n\n"
            "If eligible, you can apply directly through our platform by searching for the "
            'scheme and clicking the "Apply Now" button.',
        ),
        (
            ("application status", "check status"),
            'You can check your application status by visiting the "My Applications" section '
            "in the main menu. There you'll find a list of all your applications with their "
            "current status (Pending, Approved, Rejected). You can click on any application "
            "to view more details.",
        ),
        (
            ("document", "upload"),
            "Most schemes require basic documents such as:\n\n"
            "1. Aadhaar Card\n"
            "2. Income Certificate\n"
            "3. Caste Certificate (if applicable)\n"
            "4. Bank Account Details\n"
            "5. Passport-sized photograph\n\n"
            "Specific schemes may require additional documents. When you apply for a scheme, "
            "our system will show you exactly what documents are needed.",
        ),
        (
            ("grievance", "complaint"),
            "To file a grievance:\n\n"
            '1. Go to the "Grievances" section in the main menu\n'
            '2. Click on "File New Grievance"\n'
            "3. Select the issue type and provide details\n"
            "4. Attach any supporting documents if needed\n"
            "5. Submit your grievance\n\n"
            'You can track the status of your grievance in the "My Grievances" section.',
        ),
    ],
    "hi": [
        (
            ("पात्र", "योग्य"),
            "कल्याण योजनाओं के लिए आपकी पात्रता जांचने के लिए, मुझे आपके बारे में कुछ विवरण "
            "जानने की आवश्यकता है। यदि आपने अपना प्रोफ़ाइल पूरा कर लिया है, तो मैं आपकी उम्र, आय, "
            "स्थान और अन्य कारकों के आधार पर योजनाओं की सिफारिश कर सकता हूं। क्या आप चाहते हैं "
            "कि मैं जांचूं कि आप किन योजनाओं के लिए पात्र हो सकते हैं?",
        ),
        (
            ("पीएम किसान", "pm kisan"),
            "पीएम किसान योजना के लिए आवेदन करने के लिए:\n\n"
            "1. सुनिश्चित करें कि आप छोटे या सीमांत किसान हैं\n"
            "2. दस्तावेज तैयार करें: आधार कार्ड, भूमि रिकॉर्ड, बैंक खाता विवरण\n"
            "3. हमारे आवेदन पोर्टल के माध्यम से पंजीकरण करें\n"
            "4. आवश्यक दस्तावेज अपलोड करें\n"
            "5. अपना आवेदन जमा करें\n\n"
            "आप मेरे आवेदन अनुभाग के माध्यम से अपने आवेदन की स्थिति को ट्रैक कर सकते हैं।",
        ),
        (
            ("आयुष्मान भारत", "pmjay"),
            "आयुष्मान भारत (PMJAY) के लिए, निम्नलिखित दस्तावेज़ आवश्यक हैं:\n\n"
            "1. आधार कार्ड\n"
            "2. राशन कार्ड\n"
            "3. आय प्रमाण पत्र\n"
            "4. हाल का पासपोर्ट आकार का फोटो\n"
            "5. निवास प्रमाण\n\n"
            'यदि पात्र हैं, तो आप योजना की खोज करके और "अभी आवेदन करें" बटन पर क्लिक करके '
            "हमारे प्लेटफॉर्म के माध्यम से सीधे आवेदन कर सकते हैं।",
        ),
        (
            ("आवेदन स्थिति", "स्टेटस"),
            'आप मुख्य मेनू में "मेरे आवेदन" अनुभाग पर जाकर अपने आवेदन की स्थिति की जांच कर '
            "सकते हैं। वहां आपको अपने सभी आवेदनों की उनकी वर्तमान स्थिति (लंबित, स्वीकृत, "
            "अस्वीकृत) के साथ एक सूची मिलेगी। आप अधिक विवरण देखने के लिए किसी भी आवेदन पर "
            "क्लिक कर सकते हैं।",
        ),
        (
            ("दस्तावेज", "अपलोड"),
            "अधिकांश योजनाओं के लिए बुनियादी दस्तावेजों की आवश्यकता होती है जैसे:\n\n"
            "1. आधार कार्ड\n"
            "2. आय प्रमाण पत्र\n"
            "3. जाति प्रमाण पत्र (यदि लागू हो)\n"
            "4. बैंक खाता विवरण\n"
            "5. पासपोर्ट आकार का फोटो\n\n"
            "विशिष्ट योजनाओं के लिए अतिरिक्त दस्तावेजों की आवश्यकता हो सकती है। जब आप किसी "
            "योजना के लिए आवेदन करते हैं, तो हमारा सिस्टम आपको दिखाएगा कि कौन से दस्तावेज "
            "आवश्यक हैं।",
        ),
        (
            ("शिकायत", "समस्या"),
            "शिकायत दर्ज करने के लिए:\n\n"
            '1. मुख्य मेनू में "शिकायतें" अनुभाग पर जाएं\n'
            '2. "नई शिकायत दर्ज करें" पर क्लिक करें\n'
            "3. समस्या प्रकार का चयन करें और विवरण प्रदान करें\n"
            "4. यदि आवश्यक हो तो कोई सहायक दस्तावेज़ संलग्न करें\n"
            "5. अपनी शिकायत जमा करें\n\n"
            'आप "मेरी शिकायतें" अनुभाग में अपनी शिकायत की स्थिति को ट्रैक कर सकते हैं।',
        ),
    ],
}

DEFAULT_REPLY: dict[str, str] = {
    "en": "I'm here to help you with information about welfare schemes, application "
    "processes, and checking eligibility. Could you please provide more details about "
    "what you're looking for?",
    "hi": "मैं आपकी कल्याण योजनाओं, आवेदन प्रक्रियाओं और पात्रता जांचने के बारे में जानकारी के "
    "साथ मदद करने के लिए यहां हूं। कृपया आप जो खोज रहे हैं उसके बारे में अधिक विवरण प्रदान करें?",
}

SYSTEM_PROMPT = (
    "You are a welfare scheme assistant for Indian citizens. Answer questions about "
    "government welfare schemes, eligibility, required documents, applications and "
    "grievances. Keep answers short and practical. Reply in the language with code "
    "'{language}'."
)
