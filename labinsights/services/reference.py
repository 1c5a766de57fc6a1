from labinsights.schemas.biomarker import BiomarkerReference


BIOMARKER_REFERENCES = {
    "total_cholesterol": {
        "description": "Total cholesterol measures the total amount of cholesterol in your blood, including both HDL and LDL cholesterol.",
        "normal_range": "Less than 200 mg/dL",
        "optimal_range": "Less than 180 mg/dL",
        "what_it_means": "High total cholesterol can increase your risk of heart disease and stroke. It's important to maintain healthy levels through diet and exercise.",
        "recommendations": [
            "Reduce saturated and trans fats in your diet",
            "Increase fiber intake with fruits, vegetables, and whole grains",
            "Exercise regularly (at least 150 minutes per week)",
            "Maintain a healthy weight",
            "Consider medication if lifestyle changes aren't sufficient",
        ],
        "risk_factors": [
            "Family history of high cholesterol",
            "Poor diet high in saturated fats",
            "Lack of physical activity",
            "Obesity",
            "Smoking",
        ],
    },
    "ldl_cholesterol": {
        "description": 'LDL (low-density lipoprotein) cholesterol is often called "bad" cholesterol because it can build up in artery walls.',
        "normal_range": "Less than 100 mg/dL",
        "optimal_range": "Less than 70 mg/dL",
        "what_it_means": "High LDL cholesterol is a major risk factor for heart disease and stroke. Lower levels are generally better for heart health.",
        "recommendations": [
            "Follow a heart-healthy diet (DASH or Mediterranean)",
            "Limit red meat and full-fat dairy products",
            "Choose lean proteins and plant-based foods",
            "Exercise regularly",
            "Quit smoking if applicable",
        ],
        "risk_factors": [
            "High saturated fat diet",
            "Lack of exercise",
            "Obesity",
            "Diabetes",
            "Family history",
        ],
    },
    "glucose": {
        "description": "Fasting glucose measures your blood sugar level after not eating for at least 8 hours.",
        "normal_range": "70-99 mg/dL",
        "optimal_range": "70-85 mg/dL",
        "what_it_means": "High fasting glucose can indicate prediabetes or diabetes. Maintaining healthy levels is crucial for overall health.",
        "recommendations": [
            "Limit refined carbohydrates and sugary foods",
            "Eat regular, balanced meals",
            "Exercise regularly to improve insulin sensitivity",
            "Maintain a healthy weight",
            "Monitor blood sugar if recommended by your doctor",
        ],
        "risk_factors": [
            "Family history of diabetes",
            "Obesity",
            "Physical inactivity",
            "Poor diet",
            "Age over 45",
        ],
    },
    "creatinine": {
        "description": "Creatinine is a waste product filtered by the kidneys. Levels indicate how well your kidneys are functioning.",
        "normal_range": "0.6-1.2 mg/dL (men), 0.5-1.1 mg/dL (women)",
        "optimal_range": "0.7-1.0 mg/dL",
        "what_it_means": "High creatinine levels may indicate kidney problems. It's important to monitor kidney function regularly.",
        "recommendations": [
            "Stay well hydrated",
            "Follow a kidney-friendly diet if recommended",
            "Control blood pressure and diabetes",
            "Avoid excessive protein intake",
            "Regular check-ups with your doctor",
        ],
        "risk_factors": [
            "Diabetes",
            "High blood pressure",
            "Heart disease",
            "Family history of kidney disease",
            "Age over 60",
        ],
    },
}

FALLBACK_REFERENCE = {
    "description": "This biomarker provides important information about your health status.",
    "normal_range": "Consult your healthcare provider",
    "optimal_range": "Consult your healthcare provider",
    "what_it_means": "Your healthcare provider can explain what this result means for your health.",
    "recommendations": ["Consult your healthcare provider for personalized recommendations"],
    "risk_factors": ["Consult your healthcare provider for risk assessment"],
}


def known_biomarkers() -> list[str]:
    return sorted(BIOMARKER_REFERENCES)


def get_reference(biomarker_id: str) -> BiomarkerReference:
    details = BIOMARKER_REFERENCES.get(biomarker_id, FALLBACK_REFERENCE)
    return BiomarkerReference(biomarker_id=biomarker_id, **details)
